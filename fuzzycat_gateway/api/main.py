"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from fuzzycat_gateway.api.middleware import RequestIDMiddleware, MetricsMiddleware
from fuzzycat_gateway.api.v1 import payout, rates, schedule
from fuzzycat_gateway.infrastructure.observability.logging import setup_logging
from fuzzycat_gateway.config import settings

# Setup structured logging
setup_logging(settings.log_level, settings.service_name)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="FuzzyCat Payment Engine",
        description="Payment schedule and fee allocation service for veterinary payment plans",
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
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(schedule.router, prefix="/v1", tags=["schedules"])
    app.include_router(payout.router, prefix="/v1", tags=["payouts"])
    app.include_router(rates.router, prefix="/v1", tags=["rates"])

    return app


app = create_app()
