"""
Prometheus metrics for the FAQ search service.

Tracks HTTP traffic, search operations, suggestions and corpus size.
"""

from fastapi import Response
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Gauge, Histogram, generate_latest

# Request metrics
http_requests_total = Counter(
    "faq_http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status"],
)

http_request_duration_seconds = Histogram(
    "faq_http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0),
)

# Search metrics
search_queries_total = Counter(
    "faq_search_queries_total", "Total search queries", ["status"]
)

search_query_duration_seconds = Histogram(
    "faq_search_query_duration_seconds",
    "Ranking and filtering duration in seconds",
    buckets=(0.0005, 0.001, 0.0025, 0.005, 0.01, 0.025, 0.05, 0.1, 0.5),
)

search_results_per_query = Histogram(
    "faq_search_results_per_query",
    "Number of ranked results per query before pagination",
    buckets=(0, 1, 5, 10, 25, 50, 100, 250),
)

suggestion_requests_total = Counter(
    "faq_suggestion_requests_total", "Total suggestion requests", ["status"]
)

# Corpus metrics
faq_corpus_size = Gauge("faq_corpus_size", "Number of FAQs in the store")


def record_search(status: str, duration_seconds: float, result_count: int) -> None:
    """Record one search request."""
    search_queries_total.labels(status=status).inc()
    if status == "success":
        search_query_duration_seconds.observe(duration_seconds)
        search_results_per_query.observe(result_count)


def metrics_endpoint() -> Response:
    """Prometheus exposition endpoint."""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
