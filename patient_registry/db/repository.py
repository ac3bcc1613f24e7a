"""
patient_registry/db/repository.py — Data access for the pacientes table.

Straight pass-through to the session; no business rules live here and
store errors propagate unchanged.
"""
from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from patient_registry.db.models import Patient


class PatientRepository:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_all(self) -> Sequence[Patient]:
        result = await self._session.execute(select(Patient).order_by(Patient.id))
        return result.scalars().all()

    async def find_by_id(self, patient_id: int) -> Patient | None:
        return await self._session.get(Patient, patient_id)

    async def save(self, patient: Patient) -> Patient:
        """Insert when ``patient.id`` is None, otherwise overwrite the row with that id."""
        persistent = await self._session.merge(patient)
        await self._session.flush()
        await self._session.refresh(persistent)
        return persistent

    async def delete_by_id(self, patient_id: int) -> None:
        await self._session.execute(delete(Patient).where(Patient.id == patient_id))
        await self._session.flush()
