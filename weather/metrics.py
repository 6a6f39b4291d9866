from __future__ import annotations

from prometheus_client import Counter, Histogram

cwa_upstream_requests_total = Counter(
    "cwa_upstream_requests_total",
    "Total CWA upstream requests by outcome",
    labelnames=["outcome"],
)

cwa_upstream_latency_seconds = Histogram(
    "cwa_upstream_latency_seconds",
    "Latency of CWA upstream requests",
    buckets=(0.1, 0.3, 0.5, 1, 2, 5, 10, 20, 30),
)

weather_forecast_requests_total = Counter(
    "weather_forecast_requests_total",
    "Total locality forecast requests served",
    labelnames=["locality"],
)

weather_forecast_errors_total = Counter(
    "weather_forecast_errors_total",
    "Total locality forecast failures",
    labelnames=["locality", "error_type"],
)
