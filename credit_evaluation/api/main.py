"""Credit evaluation HTTP app: health, Prometheus scrape and v1 routers"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from credit_evaluation.api.middleware import RequestIDMiddleware, MetricsMiddleware
from credit_evaluation.api.v1 import evaluation, installment
from credit_evaluation.infrastructure.observability.logging import setup_logging
from credit_evaluation.config import settings

# JSON logs to stdout before any router logs
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Build the app with tracing middleware and the installment and evaluation routes"""
    app = FastAPI(
        title="Credit Evaluation Service",
        description="Monthly installment calculation and tiered credit approval",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Last added runs outermost: request IDs are assigned before latency timing starts
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # Liveness check
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Scrape target
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # v1 routes
    app.include_router(installment.router, prefix="/v1", tags=["installments"])
    app.include_router(evaluation.router, prefix="/v1", tags=["evaluations"])

    return app


app = create_app()
