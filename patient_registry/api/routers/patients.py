"""
patient_registry/api/routers/patients.py — Patient CRUD endpoints.

Request-shape validation happens here; existence checks live in
PatientService. Domain errors propagate to the handler registered in
patient_registry.api.main.
"""
from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Body, Depends, Path

from patient_registry.api.deps import get_patient_service
from patient_registry.exceptions import InvalidRequestError
from patient_registry.schemas import PATIENT_ID_MAX, PatientIn, PatientOut
from patient_registry.services.patients import PatientService

router = APIRouter(
    responses={
        400: {"description": "Invalid request"},
        404: {"description": "Patient not found"},
    },
)

NULL_PATIENT_MESSAGE = "patient data must not be null"

Service = Annotated[PatientService, Depends(get_patient_service)]
OptionalPatientBody = Annotated[PatientIn | None, Body()]
PatientId = Annotated[int, Path(ge=1, le=PATIENT_ID_MAX)]


@router.get("", response_model=list[PatientOut])
async def list_patients(service: Service) -> list[PatientOut]:
    """List every patient in insertion order."""
    patients = await service.get_all()
    return [PatientOut.model_validate(p) for p in patients]


@router.get("/{patient_id}", response_model=PatientOut | None)
async def get_patient(patient_id: PatientId, service: Service) -> PatientOut | None:
    """Fetch one patient; an unknown id yields ``null`` rather than 404."""
    patient = await service.get_by_id(patient_id)
    return PatientOut.model_validate(patient) if patient is not None else None


@router.post("", response_model=PatientOut)
async def create_patient(service: Service, payload: OptionalPatientBody = None) -> PatientOut:
    if payload is None:
        raise InvalidRequestError(NULL_PATIENT_MESSAGE)
    created = await service.create(payload)
    return PatientOut.model_validate(created)


@router.put("", response_model=PatientOut)
async def update_patient(service: Service, payload: OptionalPatientBody = None) -> PatientOut:
    """
    Overwrite an existing patient.

    A body without an id is rejected exactly like a missing body.
    """
    if payload is None or payload.id is None:
        raise InvalidRequestError(NULL_PATIENT_MESSAGE)
    updated = await service.update(payload)
    return PatientOut.model_validate(updated)


@router.delete("/{patient_id}", response_model=None)
async def delete_patient(patient_id: PatientId, service: Service) -> None:
    await service.delete(patient_id)
