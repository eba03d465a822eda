"""Prometheus metrics for tracking custom metrics."""

from collections.abc import Awaitable, Callable

from fastapi import FastAPI, Request, Response
from prometheus_client import Gauge

__all__ = ["REQUESTS_IN_PROGRESS", "add_prometheus_metrics"]


REQUESTS_IN_PROGRESS = Gauge(
    "taskboard_http_requests_in_progress",
    "Active HTTP requests",
    ["method", "route"],
)


def add_prometheus_metrics(app: FastAPI) -> None:
    """Configure the FastAPI application to track in-flight HTTP requests.

    Requests are labelled by their first path segment so task IDs do not
    create a new label set per task.

    Args:
        app: The FastAPI application instance where the middleware will be added.
    """

    @app.middleware("http")
    async def track_in_flight(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        """Middleware to track the number of in-flight requests."""
        gauge = REQUESTS_IN_PROGRESS.labels(
            request.method, _route_label(request.url.path)
        )
        gauge.inc()
        try:
            return await call_next(request)
        finally:
            gauge.dec()


def _route_label(path: str) -> str:
    segment = path.strip("/").split("/", 1)[0]
    return f"/{segment}"
