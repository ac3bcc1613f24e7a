"""
patient_registry/exceptions.py — Domain errors raised by the service and router layers.

Each error carries the HTTP status it maps to; the app factory registers a
single handler for PatientRegistryError.
"""
from __future__ import annotations

from fastapi import status


class PatientRegistryError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidRequestError(PatientRegistryError):
    """Malformed or incomplete request payload."""

    status_code = status.HTTP_400_BAD_REQUEST


class PatientNotFoundError(PatientRegistryError):
    """The referenced patient id does not exist."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, patient_id: int) -> None:
        super().__init__(f"Patient with ID: {patient_id} does not exist!")
        self.patient_id = patient_id
