"""
Prometheus Metrics Middleware
Exports API metrics for monitoring
"""

from prometheus_client import Counter, Histogram, Gauge, generate_latest, CONTENT_TYPE_LATEST
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
import time

# Metrics
REQUEST_COUNT = Counter(
    'api_requests_total',
    'Total API requests',
    ['method', 'endpoint', 'status']
)

REQUEST_DURATION = Histogram(
    'api_request_duration_seconds',
    'API request duration',
    ['method', 'endpoint']
)

ACTIVE_REQUESTS = Gauge(
    'api_active_requests',
    'Currently active requests'
)

FORECAST_SUMMARIES = Counter(
    'forecast_summaries_total',
    'Forecast records served, by summary label',
    ['summary']
)


def route_label(request: Request) -> str:
    """Matched route template, or "unmatched" when no route handled the request."""
    return getattr(request.scope.get("route"), "path", "unmatched")


class PrometheusMiddleware(BaseHTTPMiddleware):
    """Middleware to collect Prometheus metrics."""

    async def dispatch(self, request: Request, call_next):
        # Skip metrics endpoint itself
        if request.url.path == "/metrics":
            return await call_next(request)

        ACTIVE_REQUESTS.inc()
        start_time = time.time()
        status = 500

        try:
            response = await call_next(request)
            status = response.status_code
            return response

        finally:
            endpoint = route_label(request)

            REQUEST_DURATION.labels(
                method=request.method,
                endpoint=endpoint
            ).observe(time.time() - start_time)

            REQUEST_COUNT.labels(
                method=request.method,
                endpoint=endpoint,
                status=status
            ).inc()

            ACTIVE_REQUESTS.dec()


def metrics_endpoint(request: Request):
    """Endpoint to expose Prometheus metrics."""
    return Response(
        content=generate_latest(),
        media_type=CONTENT_TYPE_LATEST
    )
