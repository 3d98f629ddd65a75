"""FastAPI application factory"""

import logging
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from lease_payments.api.middleware import RequestIDMiddleware, MetricsMiddleware
from lease_payments.api.v1 import frequencies, payments, schedule
from lease_payments.domain.exceptions import DomainException
from lease_payments.infrastructure.observability.logging import setup_logging
from lease_payments.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Lease Payments Service",
        description="Lease payment due dates, schedules and status classification",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # Domain errors that escape a route are client errors (bad dates, bad schedule input)
    @app.exception_handler(DomainException)
    async def domain_exception_handler(request: Request, exc: DomainException):
        logging.warning(
            f"Domain error: {exc}",
            extra={"request_id": getattr(request.state, "request_id", "unknown")},
        )
        return JSONResponse(status_code=422, content={"detail": str(exc)})

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(frequencies.router, prefix="/v1", tags=["frequencies"])
    app.include_router(schedule.router, prefix="/v1", tags=["schedules"])
    app.include_router(payments.router, prefix="/v1", tags=["payments"])

    return app


app = create_app()
