"""FastAPI application entry point for the Jarvis math engine."""

from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from math_engine import __version__
from math_engine.api.routes import math as math_routes
from math_engine.config import settings
from math_engine.observability.logging_config import configure_logging

configure_logging()

app = FastAPI(
    title="Jarvis Math Engine API",
    description="Deterministic trading math: position sizing, prop-firm plans, compounding",
    version=__version__,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(math_routes.router)


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint."""
    return {"message": "Jarvis Math Engine API", "version": __version__}


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Basic health check endpoint for Docker and monitoring."""
    return {"status": "healthy"}


@app.get("/metrics")
async def metrics() -> Response:
    """Prometheus metrics in text exposition format."""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
