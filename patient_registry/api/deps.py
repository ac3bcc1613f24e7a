"""
patient_registry/api/deps.py — FastAPI shared dependencies.

Wires the per-request database session into the repository and service
layers. Tests swap these out through app.dependency_overrides.
"""
from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from patient_registry.db.repository import PatientRepository
from patient_registry.db.session import get_db
from patient_registry.services.patients import PatientService


def get_patient_repository(
    session: Annotated[AsyncSession, Depends(get_db)],
) -> PatientRepository:
    return PatientRepository(session)


def get_patient_service(
    repository: Annotated[PatientRepository, Depends(get_patient_repository)],
) -> PatientService:
    return PatientService(repository)
