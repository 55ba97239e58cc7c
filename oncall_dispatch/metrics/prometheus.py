# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Prometheus metrics — single source of truth for all metric objects.
Imported by services and middleware. Never instantiated in controllers.
"""

from prometheus_client import Counter, Gauge, Histogram

# ── HTTP Metrics (used by middleware) ──
REQUEST_COUNT = Counter(
    "dispatch_requests_total",
    "Total HTTP requests to the dispatch service",
    ["method", "endpoint", "status"],
)
REQUEST_LATENCY = Histogram(
    "dispatch_request_duration_seconds",
    "Request latency in seconds",
    ["method", "endpoint"],
)
HTTP_ERRORS = Counter(
    "dispatch_http_errors_total",
    "Total HTTP error responses",
    ["method", "endpoint", "status"],
)

# ── Business Metrics (updated by service layer only) ──
ENTRIES_CREATED = Counter(
    "dispatch_schedule_entries_created_total",
    "Total schedule entries created",
    ["kind"],
)
ENTRIES_DELETED = Counter(
    "dispatch_schedule_entries_deleted_total",
    "Total schedule entries deleted",
    ["reason"],
)
SCHEDULE_ENTRIES = Gauge(
    "dispatch_schedule_entries",
    "Number of stored schedule entries",
)
PROFILES_LINKED = Counter(
    "dispatch_profiles_linked_total",
    "Total phone number links (including re-links)",
)
PROFILES_UNLINKED = Counter(
    "dispatch_profiles_unlinked_total",
    "Total profile unlinks",
)
ONCALL_LOOKUPS = Counter(
    "dispatch_oncall_lookups_total",
    "Total on-call lookups performed",
)
SMS_SENT = Counter(
    "dispatch_sms_sent_total",
    "Outbound SMS attempts",
    ["status"],
)
AUTH_EXCHANGES = Counter(
    "dispatch_sso_exchanges_total",
    "SSO token exchanges by outcome",
    ["outcome"],
)
