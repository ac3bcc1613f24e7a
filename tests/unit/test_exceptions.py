"""
tests/unit/test_exceptions.py — Domain error messages and status mapping.
"""
from __future__ import annotations

from patient_registry.exceptions import (
    InvalidRequestError,
    PatientNotFoundError,
    PatientRegistryError,
)


class TestDomainErrors:
    def test_not_found_message_embeds_id(self):
        exc = PatientNotFoundError(5)
        assert exc.message == "Patient with ID: 5 does not exist!"
        assert str(exc) == exc.message
        assert exc.patient_id == 5
        assert exc.status_code == 404

    def test_invalid_request_status(self):
        exc = InvalidRequestError("patient data must not be null")
        assert exc.status_code == 400
        assert exc.message == "patient data must not be null"

    def test_both_share_base_class(self):
        assert issubclass(InvalidRequestError, PatientRegistryError)
        assert issubclass(PatientNotFoundError, PatientRegistryError)
