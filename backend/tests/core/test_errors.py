"""Error hierarchy tests — status codes, codes and response envelope."""

from cadastro.core.domain_types import Locale, UserValidationFailure
from cadastro.core.errors import (
    CadastroError, ErrorCategory, ErrorSeverity, StorageError, ValidationError,
)


def test_validation_error_is_400_with_failure_code():
    exc = ValidationError(UserValidationFailure.NAME_TOO_SHORT)
    assert isinstance(exc, CadastroError)
    assert exc.http_status == 400
    assert exc.code == "NAME_TOO_SHORT"
    assert exc.category == ErrorCategory.VALIDATION
    assert exc.failure == UserValidationFailure.NAME_TOO_SHORT


def test_validation_error_defaults_to_pt_br_message():
    exc = ValidationError(UserValidationFailure.NAME_TOO_SHORT)
    assert exc.message == "O nome deve ter no mínimo 3 caracteres."
    assert exc.locale == Locale.PT_BR


def test_validation_error_in_english():
    exc = ValidationError(UserValidationFailure.INVALID_EMAIL, Locale.EN)
    assert exc.message == "invalid email format"


def test_storage_error_is_500_critical():
    exc = StorageError("Integrity constraint violated", "commit")
    assert exc.http_status == 500
    assert exc.code == "STORAGE_ERROR"
    assert exc.severity == ErrorSeverity.CRITICAL
    assert exc.operation == "commit"
    assert "commit" in exc.message


def test_to_response_envelope():
    exc = ValidationError(UserValidationFailure.REQUIRED_FIELDS)
    assert exc.to_response() == {
        "error": "Nome, email e senha são obrigatórios.",
        "code": "REQUIRED_FIELDS",
    }


def test_str_is_message():
    exc = StorageError("boom", "execute")
    assert str(exc) == exc.message


def test_validation_error_logs_as_warning():
    exc = ValidationError(UserValidationFailure.INVALID_EMAIL)
    assert exc.severity == ErrorSeverity.WARNING
