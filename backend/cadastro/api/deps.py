"""FastAPI Dependencies — wire the lifespan-owned Database into request handlers.

Invariants:
    - The Database instance is read from app.state, never constructed per request
    - Services are cheap to build; one per request keeps them stateless

Design Decisions:
    - Dependencies over module singletons: tests swap the gateway with
      app.dependency_overrides[get_database]
"""

from fastapi import Depends, Request

from cadastro.config import Settings, get_settings
from cadastro.core.domain_types import Locale
from cadastro.core.error_messages import resolve_locale
from cadastro.infrastructure.database import Database
from cadastro.infrastructure.password_hashing import BcryptPasswordHasher
from cadastro.services.user_repository import SqlUserRepository
from cadastro.services.user_service import UserService


def get_database(request: Request) -> Database:
    """Get the process-wide storage gateway."""
    database: Database | None = getattr(request.app.state, "database", None)
    if database is None:
        raise RuntimeError("Database not initialized")
    return database


def get_user_service(
    database: Database = Depends(get_database),
    settings: Settings = Depends(get_settings),
) -> UserService:
    return UserService(
        SqlUserRepository(database),
        BcryptPasswordHasher(rounds=settings.password_hash_rounds),
    )


def get_locale(
    request: Request, settings: Settings = Depends(get_settings),
) -> Locale:
    """Locale for user-facing messages: Accept-Language, else the configured default."""
    return request_locale(request, settings)


def request_locale(request: Request, settings: Settings) -> Locale:
    return resolve_locale(
        request.headers.get("accept-language"), Locale(settings.locale),
    )
