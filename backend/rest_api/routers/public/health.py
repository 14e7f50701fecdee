"""
Health check endpoints for the REST API.
Provides basic and detailed health status of the service and its dependencies.
"""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from shared.config.settings import settings
from shared.infrastructure.db import engine, audit_engine


router = APIRouter(prefix="/api", tags=["health"])


@router.get("/health")
def health_check():
    """
    Basic health check endpoint.
    Returns service status without checking dependencies.
    """
    return {
        "status": "healthy",
        "service": "rest-api",
        "environment": settings.environment,
    }


def _check_database(target: Engine) -> dict:
    try:
        with target.connect() as conn:
            conn.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        return {"status": "unhealthy", "error": str(e)}
    return {"status": "healthy"}


@router.get("/health/detailed")
def detailed_health_check(request: Request):
    """
    Detailed health check that verifies connectivity to dependencies.
    Returns status of the catalog database, the audit database and the audit bus.

    Returns 503 Service Unavailable if any dependency is down.
    """
    bus = getattr(request.app.state, "audit_bus", None)
    dependencies = {
        "database": _check_database(engine),
        "audit_database": _check_database(audit_engine),
        "audit_bus": {
            "status": "healthy" if bus is not None and bus.is_running else "unhealthy",
        },
    }

    all_healthy = all(dep["status"] == "healthy" for dep in dependencies.values())
    checks = {
        "service": "rest-api",
        "environment": settings.environment,
        "status": "healthy" if all_healthy else "degraded",
        "dependencies": dependencies,
    }

    if not all_healthy:
        return JSONResponse(content=checks, status_code=503)

    return checks
