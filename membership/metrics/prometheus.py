# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Prometheus metrics — single source of truth for all metric objects.
Imported by services and middleware. Never instantiated in controllers.
"""

from prometheus_client import Counter, Gauge, Histogram

# ── HTTP Metrics (used by middleware) ──
REQUEST_COUNT = Counter(
    "membership_requests_total",
    "Total HTTP requests to membership service",
    ["method", "endpoint", "status"],
)
REQUEST_LATENCY = Histogram(
    "membership_request_duration_seconds",
    "Request latency in seconds",
    ["method", "endpoint"],
)
HTTP_ERRORS = Counter(
    "membership_http_errors_total",
    "Total HTTP error responses",
    ["method", "endpoint", "status"],
)

# ── Business Metrics (updated by service layer only) ──
MEMBERS_REGISTERED = Counter(
    "members_registered_total",
    "Total members registered",
)
DUPLICATE_REJECTIONS = Counter(
    "member_duplicate_rejections_total",
    "Registrations rejected because the name was taken",
)
MEMBERS_TOTAL = Gauge(
    "members_total",
    "Number of stored members",
)
