"""User Routes — POST /usuarios/criar adapts HTTP to UserService.create_user.

Invariants:
    - 201 {"id": int} on success
    - Rule violations raise ValidationError (400); StorageError passes through (500)
    - A missing body is treated as an empty payload, so it fails REQUIRED_FIELDS

Design Decisions:
    - Path kept as /usuarios/criar: existing clients call it
    - Route raises, global handlers render: one response shape for every error
"""

import logging

from fastapi import APIRouter, Body, Depends, status

from cadastro.api.deps import get_locale, get_user_service
from cadastro.core.domain_types import Locale
from cadastro.core.errors import ValidationError
from cadastro.schemas.user import ErrorResponse, UserCreate, UserCreated
from cadastro.services.user_service import UserService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/usuarios", tags=["usuarios"])


@router.post(
    "/criar",
    response_model=UserCreated,
    status_code=status.HTTP_201_CREATED,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)
async def create_user(
    body: UserCreate | None = Body(None),
    service: UserService = Depends(get_user_service),
    locale: Locale = Depends(get_locale),
):
    """Register a user and return the generated id."""
    payload = body or UserCreate()
    result = await service.create_user(payload.to_domain())
    if not result.ok:
        raise ValidationError(result.failure, locale)
    return UserCreated(id=result.user_id)
