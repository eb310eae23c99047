"""Error Messages — centralized locale-specific text for user-facing errors.

Invariants:
    - All strings are pure data (no IO, no computation beyond lookup)
    - Every UserValidationFailure has a message in every Locale
    - pt-BR wording is the canonical one shipped to existing clients

Design Decisions:
    - Machine-readable code travels next to the message: clients branch on the
      code, humans read the message
"""

from cadastro.core.domain_types import Locale, UserValidationFailure

DEFAULT_LOCALE = Locale.PT_BR


_VALIDATION_MESSAGES: dict[Locale, dict[UserValidationFailure, str]] = {
    Locale.PT_BR: {
        UserValidationFailure.REQUIRED_FIELDS: "Nome, email e senha são obrigatórios.",
        UserValidationFailure.NAME_TOO_SHORT: "O nome deve ter no mínimo 3 caracteres.",
        UserValidationFailure.INVALID_EMAIL: "Formato de email inválido.",
        UserValidationFailure.PASSWORD_TOO_SHORT: "A senha deve ter no mínimo 6 caracteres.",
    },
    Locale.EN: {
        UserValidationFailure.REQUIRED_FIELDS: "name, email and password are required",
        UserValidationFailure.NAME_TOO_SHORT: "name must be at least 3 characters",
        UserValidationFailure.INVALID_EMAIL: "invalid email format",
        UserValidationFailure.PASSWORD_TOO_SHORT: "password must be at least 6 characters",
    },
}

_INVALID_PAYLOAD_MESSAGE: dict[Locale, str] = {
    Locale.PT_BR: "Dados da requisição inválidos.",
    Locale.EN: "invalid request data",
}


# --- Public API ---------------------------------------------------------------


def get_validation_message(
    failure: UserValidationFailure, locale: Locale = DEFAULT_LOCALE,
) -> str:
    """Human-readable text for a validation failure in the given locale."""
    return _VALIDATION_MESSAGES[locale][failure]


def get_invalid_payload_message(locale: Locale = DEFAULT_LOCALE) -> str:
    return _INVALID_PAYLOAD_MESSAGE[locale]


def resolve_locale(
    accept_language: str | None, default: Locale = DEFAULT_LOCALE,
) -> Locale:
    """Pick the first supported locale named in an Accept-Language header.

    Matching is case-insensitive on the primary tag, so "pt", "pt-PT" and
    "pt-BR" all select pt-BR. Quality weights are ignored; header order wins.
    """
    if not accept_language:
        return default
    for part in accept_language.split(","):
        tag = part.split(";")[0].strip().lower()
        if not tag:
            continue
        primary = tag.split("-")[0]
        if primary == "pt":
            return Locale.PT_BR
        if primary == "en":
            return Locale.EN
    return default
