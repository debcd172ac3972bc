"""
Prometheus Metrics for the math engine.

Tracks how often each task type runs, how it ends, and how long it takes.
Exposed over HTTP at GET /metrics.
"""

from prometheus_client import Counter, Histogram

math_task_requests_total = Counter(
    "math_task_requests_total",
    "Total number of math task executions",
    labelnames=["task_type", "status"],
)

math_task_duration_seconds = Histogram(
    "math_task_duration_seconds",
    "Math task execution time in seconds",
    labelnames=["task_type"],
    buckets=[0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05, 0.1],  # Pure functions, sub-ms expected
)
