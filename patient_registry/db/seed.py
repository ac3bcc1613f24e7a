"""patient_registry/db/seed.py — Sample patients for local development and tests."""
from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from patient_registry.db.models import Patient
from patient_registry.db.repository import PatientRepository

SAMPLE_PATIENTS: list[dict] = [
    {"name": "Pepe Argento", "age": 23, "email": "pepe@gmail.com"},
    {"name": "Juan Castro",  "age": 44, "email": "juan@gmail.com"},
    {"name": "Felipe Melo",  "age": 18, "email": "felipe@gmail.com"},
]


async def seed_patients(session: AsyncSession) -> list[Patient]:
    """Insert SAMPLE_PATIENTS in order and return the stored rows. Does not commit."""
    repo = PatientRepository(session)
    return [await repo.save(Patient(**data)) for data in SAMPLE_PATIENTS]
