"""
patient_registry/services/patients.py — Patient business logic.

Update and delete look the id up before mutating, so an operation on a
missing patient fails with PatientNotFoundError instead of silently
matching zero rows. The check and the write are separate statements and
are not atomic.
"""
from __future__ import annotations

from collections.abc import Sequence

import structlog

from patient_registry.db.models import Patient
from patient_registry.db.repository import PatientRepository
from patient_registry.exceptions import PatientNotFoundError
from patient_registry.schemas import PatientIn

logger = structlog.get_logger()


class PatientService:
    def __init__(self, repository: PatientRepository) -> None:
        self._repo = repository

    async def get_all(self) -> Sequence[Patient]:
        return await self._repo.find_all()

    async def get_by_id(self, patient_id: int) -> Patient | None:
        return await self._repo.find_by_id(patient_id)

    async def create(self, data: PatientIn) -> Patient:
        """Persist a new patient. Payload validation is the caller's job; any id is ignored."""
        patient = Patient(name=data.name, age=data.age, email=data.email)
        created = await self._repo.save(patient)
        logger.info("patient_created", patient_id=created.id)
        return created

    async def update(self, candidate: PatientIn) -> Patient:
        """
        Overwrite every mutable field of an existing patient.

        Raises:
            PatientNotFoundError: If no patient has ``candidate.id``.
        """
        existing = await self._repo.find_by_id(candidate.id)
        if existing is None:
            logger.warning("patient_update_missing", patient_id=candidate.id)
            raise PatientNotFoundError(candidate.id)

        existing.name = candidate.name
        existing.age = candidate.age
        existing.email = candidate.email
        updated = await self._repo.save(existing)
        logger.info("patient_updated", patient_id=updated.id)
        return updated

    async def delete(self, patient_id: int) -> None:
        if await self._repo.find_by_id(patient_id) is None:
            logger.warning("patient_delete_missing", patient_id=patient_id)
            raise PatientNotFoundError(patient_id)

        await self._repo.delete_by_id(patient_id)
        logger.info("patient_deleted", patient_id=patient_id)
