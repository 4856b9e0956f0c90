"""Prometheus metrics for dashboard traffic, filter selectivity and record store health"""

from prometheus_client import Counter, Histogram, Gauge

# Dashboard metrics
dashboard_requests_counter = Counter(
    "seismic_dashboard_requests_total",
    "Dashboard data requests served",
    ["endpoint"],  # dashboard | fintechs | detail | stats | impact
)

filtered_results_histogram = Histogram(
    "seismic_filtered_results",
    "Records left after applying search/category/status filters",
    buckets=[0, 1, 5, 10, 25, 50, 100, 250],
)

# Record store metrics
records_loaded_gauge = Gauge(
    "seismic_records_loaded",
    "Records in the most recently loaded collection",
)

record_fetch_failures_counter = Counter(
    "record_fetch_failures_total",
    "Failed record collection fetches",
    ["source"],  # database | file | http
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_collection_loaded(endpoint: str, total: int, showing: int | None = None) -> None:
    """Record request and collection size metrics after a successful fetch"""
    dashboard_requests_counter.labels(endpoint=endpoint).inc()
    records_loaded_gauge.set(total)

    if showing is not None:
        filtered_results_histogram.observe(showing)
