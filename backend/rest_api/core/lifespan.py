"""
Application lifespan handler.
Manages startup and shutdown events for the FastAPI application.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from shared.infrastructure.db import engine, audit_engine, AuditSessionLocal
from shared.config.settings import settings
from shared.config.logging import setup_logging, rest_api_logger as logger
from rest_api.models import Base, AuditBase
from rest_api.services.events import (
    AuditEventBus,
    DatabaseAuditSink,
    LoggingAuditSubscriber,
)


def build_audit_bus() -> AuditEventBus:
    """Audit bus with the configured sinks (not started)."""
    bus = AuditEventBus()
    bus.subscribe(LoggingAuditSubscriber())
    if settings.audit_sink_enabled:
        bus.subscribe(DatabaseAuditSink(AuditSessionLocal))
    return bus


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.
    Runs on startup and shutdown.
    """
    # Initialize logging
    setup_logging()

    # Validate configuration before startup
    config_errors = settings.validate_production_settings()
    if config_errors:
        for error in config_errors:
            logger.error("Configuration error: %s", error)
        if settings.environment == "production":
            raise RuntimeError(
                f"Production configuration errors: {'; '.join(config_errors)}. "
                "Server will not start with this configuration."
            )
        else:
            logger.warning(
                "Running with unsafe defaults (acceptable for development only)"
            )

    # Startup
    logger.info("Starting REST API", port=settings.rest_api_port, env=settings.environment)

    if settings.create_tables_on_startup:
        Base.metadata.create_all(bind=engine)
        AuditBase.metadata.create_all(bind=audit_engine)
        logger.info("Database tables created/verified")

    # A bus handed to create_app() belongs to the caller
    owns_bus = app.state.audit_bus is None
    if owns_bus:
        app.state.audit_bus = build_audit_bus()
    app.state.audit_bus.start()

    yield

    # Shutdown
    logger.info("Shutting down REST API")

    if owns_bus:
        app.state.audit_bus.stop()
        app.state.audit_bus = None
        logger.info("Audit bus stopped")
