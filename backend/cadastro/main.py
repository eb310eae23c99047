"""Cadastro API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map CadastroError → {"error", "code"} JSON responses
    - CORS configured from settings (not hardcoded)
    - One Database per process: opened on startup, closed on shutdown
    - A failed schema setup aborts startup (StorageError escapes the lifespan)

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Database kept on app.state and injected via api/deps.get_database
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from cadastro.api.error_handlers import register_error_handlers
from cadastro.api.routes import health, users
from cadastro.config import get_settings
from cadastro.core.errors import StorageError
from cadastro.infrastructure.database import Database
from cadastro.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)

GREETING = "Olá, Mundo! Bem-vindo ao Cadastro API."


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    database = Database(settings.database_url)
    try:
        await database.init()
    except StorageError:
        await database.close()
        raise
    app.state.database = database
    logger.info("Cadastro API started")
    try:
        yield
    finally:
        logger.info("Cadastro API shutting down")
        await database.close()
        app.state.database = None


app = FastAPI(title="Cadastro API", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(users.router)

register_error_handlers(app)


@app.get("/", response_class=PlainTextResponse)
async def root():
    """Diagnostic greeting."""
    return GREETING


def run() -> None:
    """Serve the app with uvicorn on the configured host and port."""
    settings = get_settings()
    uvicorn.run(
        "cadastro.main:app", host=settings.host, port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    run()
