"""FastAPI application entry point."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from lingualearn.config import configure_logging, get_settings
from lingualearn.database import dispose_engine, get_engine, initialize_database
from lingualearn.domain.common.exceptions import (
    AuthorizationError,
    DomainError,
    EntityNotFoundError,
    InvariantViolationError,
)
from lingualearn.domain.common.exceptions import ValidationError as DomainValidationError
from lingualearn.exceptions import LinguaLearnError
from lingualearn.infrastructure.catalog.routers import flashcards, levels
from lingualearn.infrastructure.migrations import runner
from lingualearn.infrastructure.progress.routers import level_progress, progress, quiz_attempts

settings = get_settings()
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    configure_logging(settings.ENVIRONMENT)
    initialize_database(settings)
    if settings.RUN_MIGRATIONS_ON_STARTUP:
        runner.upgrade(get_engine())
    logger.info("application_started", environment=settings.ENVIRONMENT)
    yield
    dispose_engine()


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    docs_url=f"{settings.API_V1_PREFIX}/docs",
    openapi_url=f"{settings.API_V1_PREFIX}/openapi.json",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(LinguaLearnError)
async def lingualearn_error_handler(_request: Request, exc: LinguaLearnError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message, "error": exc.kind},
    )


def _domain_error_status(exc: DomainError) -> tuple[int, str]:
    if isinstance(exc, (DomainValidationError, InvariantViolationError)):
        return status.HTTP_400_BAD_REQUEST, "validation_error"
    if isinstance(exc, EntityNotFoundError):
        return status.HTTP_404_NOT_FOUND, "not_found"
    if isinstance(exc, AuthorizationError):
        return status.HTTP_403_FORBIDDEN, "access_denied"
    return status.HTTP_400_BAD_REQUEST, "domain_error"


@app.exception_handler(DomainError)
async def domain_error_handler(_request: Request, exc: DomainError) -> JSONResponse:
    status_code, kind = _domain_error_status(exc)
    return JSONResponse(status_code=status_code, content={"detail": exc.message, "error": kind})


app.include_router(flashcards.router, prefix=settings.API_V1_PREFIX)
app.include_router(levels.router, prefix=settings.API_V1_PREFIX)
app.include_router(level_progress.router, prefix=settings.API_V1_PREFIX)
app.include_router(progress.router, prefix=settings.API_V1_PREFIX)
app.include_router(quiz_attempts.router, prefix=settings.API_V1_PREFIX)


@app.get("/")
async def root() -> dict[str, str]:
    return {"message": f"Welcome to {settings.PROJECT_NAME}"}


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "healthy"}


@app.get(f"{settings.API_V1_PREFIX}/")
async def api_root() -> dict[str, str]:
    return {
        "message": f"{settings.PROJECT_NAME} v1",
        "version": settings.VERSION,
        "docs": f"{settings.API_V1_PREFIX}/docs",
    }
