"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from seismic_intel.api.middleware import RequestIDMiddleware, MetricsMiddleware
from seismic_intel.api.v1 import dashboard, fintechs, stats
from seismic_intel.infrastructure.observability.logging import setup_logging
from seismic_intel.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Seismic Fintech Intelligence",
        description="Fintech catalog, aggregate stats and encrypted-rails impact calculator",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name, "record_source": settings.record_source}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(dashboard.router, prefix="/v1", tags=["dashboard"])
    app.include_router(fintechs.router, prefix="/v1", tags=["fintechs"])
    app.include_router(stats.router, prefix="/v1", tags=["stats"])

    return app


app = create_app()
