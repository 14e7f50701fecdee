"""
REST API main application.
Entry point for the FastAPI REST server.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from rest_api.core.cors import configure_cors
from rest_api.core.lifespan import lifespan
from rest_api.core.middlewares import register_middlewares
from rest_api.routers.catalog import router as catalog_router
from rest_api.routers.public import health_router
from rest_api.services.events import AuditEventBus
from shared.config.settings import settings
from shared.utils.exceptions import AppException


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Single mapping from the error taxonomy to HTTP responses."""
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict(),
        headers=exc.headers,
    )


def create_app(audit_bus: AuditEventBus | None = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        audit_bus: Bus to publish audit events on. When omitted the lifespan
            handler builds one with the configured sinks and owns it.
    """
    app = FastAPI(
        title="Fitness Catalog REST API",
        description="Products, nutrients and their nutritional values",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.audit_bus = audit_bus

    configure_cors(app)
    register_middlewares(app)

    app.add_exception_handler(AppException, app_exception_handler)

    app.include_router(health_router)
    app.include_router(catalog_router)

    return app


app = create_app()


# =============================================================================
# Development entry point
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "rest_api.main:app",
        host="0.0.0.0",
        port=settings.rest_api_port,
        reload=True,
    )
