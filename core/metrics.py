"""
Prometheus metrics for the license service.

Custom metrics for business logic and performance monitoring.
"""

from prometheus_client import Counter, Histogram

# HTTP metrics
http_requests_total = Counter(
    "http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status_code"],
)

http_request_duration_seconds = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.5, 1.0, 2.0, 5.0, 10.0],
)

# License metrics
license_keys_created_total = Counter(
    "license_keys_created_total",
    "Total license keys created",
    ["brand_code"],
)

licenses_provisioned_total = Counter(
    "licenses_provisioned_total",
    "Total licenses attached to a license key",
    ["brand_code", "product_code"],
)

license_transitions_total = Counter(
    "license_transitions_total",
    "Total applied license lifecycle actions",
    ["brand_code", "action"],
)

license_activations_total = Counter(
    "license_activations_total",
    "Total activation requests by outcome",
    ["outcome"],
)

license_validations_total = Counter(
    "license_validations_total",
    "Total validation requests by result",
    ["result"],
)

# Error metrics
domain_errors_total = Counter(
    "domain_errors_total",
    "Total domain errors returned to callers",
    ["code"],
)
