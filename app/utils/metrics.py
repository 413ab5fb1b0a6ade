"""
Prometheus-based metrics for production monitoring.
Provides /metrics endpoint for scraping.
"""
from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST
from fastapi import APIRouter, Response


# Counters
paywall_decisions_total = Counter(
    "paywall_decisions_total",
    "Total paywall decisions",
    ["result"],  # ALLOW, BLOCK
)

article_requests_total = Counter(
    "article_requests_total",
    "Total paywalled article documents served",
)

http_requests_total = Counter(
    "http_requests_total",
    "Total HTTP requests handled",
    ["method", "status"],
)

# Histograms
http_request_duration_seconds = Histogram(
    "http_request_duration_seconds",
    "HTTP request handling duration",
    buckets=[0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1],
)


# Metrics endpoint router
router = APIRouter()


@router.get("/metrics")
def metrics_endpoint() -> Response:
    """Prometheus metrics endpoint for scraping."""
    return Response(
        content=generate_latest(),
        media_type=CONTENT_TYPE_LATEST,
    )
