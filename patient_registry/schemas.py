"""patient_registry/schemas.py — Request / response models for the patient resource."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


# Upper bound of a signed 64-bit identity column
PATIENT_ID_MAX = 2**63 - 1


class PatientIn(BaseModel):
    id: int | None = Field(
        None, ge=1, le=PATIENT_ID_MAX, description="Required on update, ignored on create"
    )
    name: str = Field(..., min_length=1, description="Patient full name")
    age: int = Field(..., description="Patient age in years")
    email: str = Field(..., description="Contact email (not format-checked)")


class PatientOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    age: int
    email: str
