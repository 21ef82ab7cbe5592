"""Application lifespan: startup and shutdown.

Wiring only: logging, telemetry, the Firestore client and the repositories
built on it. Repositories (and their caches) live on app.state for the life
of the process.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from venuehub.api.v1.composition import build_repositories
from venuehub.core.config import get_settings
from venuehub.infrastructure.firebase import close_firebase, init_firebase
from venuehub.shared.telemetry import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup order: logging, telemetry (if enabled), Firestore client and
    repositories (if credentials are configured). Repositories already set on
    app.state (tests) are kept. Shutdown: Firestore HTTP pool, telemetry.
    """
    settings = get_settings()
    setup_logging()

    # ---- Startup ----
    if settings.telemetry_enabled:
        from venuehub.shared.telemetry.telemetry import TelemetryConfig, set_telemetry

        telemetry = TelemetryConfig(
            service_name=settings.app_name,
            service_version=settings.app_version,
            enabled=True,
            environment=settings.telemetry_environment,
        )
        telemetry.setup_telemetry(
            exporter_type=settings.telemetry_exporter,
            otlp_endpoint=settings.telemetry_otlp_endpoint,
            sample_rate=settings.telemetry_sample_rate,
        )
        set_telemetry(telemetry)
        telemetry.instrument_fastapi(app)
        telemetry.instrument_logging()
        logger.info("Telemetry initialized")

    if getattr(app.state, "repositories", None) is None:
        client = init_firebase() if settings.firestore_configured else None
        app.state.repositories = build_repositories(client) if client is not None else None

    yield

    # ---- Shutdown ----
    await close_firebase()

    from venuehub.shared.telemetry.telemetry import get_telemetry, set_telemetry

    telemetry_instance = get_telemetry()
    if telemetry_instance is not None:
        telemetry_instance.shutdown()
        set_telemetry(None)
        logger.info("Telemetry shutdown complete")
