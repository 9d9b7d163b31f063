"""
Test per la gerarchia di eccezioni
"""

from src.core.exceptions import SubmissionError, InfrastructureException


def test_submission_error_does_not_modify_caller_details():
    details = {"import_type": "assets"}

    error = SubmissionError("Import failed", upstream_status=409, details=details)

    assert details == {"import_type": "assets"}
    assert error.details == {"import_type": "assets", "upstream_status": 409}


def test_submission_error_to_dict():
    error = SubmissionError()

    assert isinstance(error, InfrastructureException)
    assert error.to_dict() == {
        "error_code": "EXTERNAL_SERVICE_ERROR",
        "message": "Import failed",
        "details": {},
        "status_code": 502
    }
