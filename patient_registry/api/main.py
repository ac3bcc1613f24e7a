"""
patient_registry/api/main.py — FastAPI application entry point.

Configures logging and middleware, mounts the patient router, registers
the domain exception handlers, and sets up the lifespan context.
"""
from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

from patient_registry.api.routers import patients
from patient_registry.config import Settings, get_settings
from patient_registry.exceptions import PatientRegistryError
from patient_registry.logging_config import configure_logging

logger = structlog.get_logger()

API_VERSION = "1.0.0"


def create_limiter(settings: Settings) -> Limiter:
    """Per-client limiter applying settings.rate_limit_general to every route."""
    return Limiter(
        key_func=get_remote_address,
        default_limits=[settings.rate_limit_general],
        enabled=settings.rate_limit_enabled,
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan: runs at startup and shutdown."""
    settings: Settings = app.state.settings
    logger.info("event", message="Starting Patient Registry API", env=settings.environment)

    if settings.auto_create_schema:
        from patient_registry.db.session import init_models
        await init_models()
        logger.info("event", message="Database schema created")

    yield

    from patient_registry.db.session import engine
    await engine.dispose()
    logger.info("event", message="Shutting down API")


async def patient_registry_error_handler(
    request: Request, exc: PatientRegistryError
) -> JSONResponse:
    logger.info(
        "request_rejected",
        path=request.url.path,
        status_code=exc.status_code,
        detail=exc.message,
    )
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Incomplete or mistyped payloads are invalid requests (400), not 422."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "detail": "patient data is invalid",
            "errors": jsonable_encoder(exc.errors()),
        },
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title="Patient Registry API",
        description="CRUD service for patient records.",
        version=API_VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.settings = settings

    # ── Middleware ────────────────────────────────────────────────────────────
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[str(o).rstrip("/") for o in settings.cors_origins],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Rate limiting
    app.state.limiter = create_limiter(settings)
    app.add_middleware(SlowAPIMiddleware)
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    # ── Error mapping ─────────────────────────────────────────────────────────
    app.add_exception_handler(PatientRegistryError, patient_registry_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    # ── Routers ───────────────────────────────────────────────────────────────
    app.include_router(patients.router, prefix="/api/pacientes", tags=["Patients"])

    # ── Health Check ──────────────────────────────────────────────────────────
    @app.get("/health", tags=["System"])
    async def health_check() -> dict:
        return {"status": "healthy", "version": API_VERSION, "environment": settings.environment}

    return app


app = create_app()
