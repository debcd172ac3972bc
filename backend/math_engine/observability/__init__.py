"""Observability: structlog setup and Prometheus metrics."""
