# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Prometheus metric objects for the team join service.
HTTP metrics are updated by middleware, join metrics by JoinService.
"""

from prometheus_client import Counter, Histogram

# ── HTTP Metrics (used by middleware) ──
REQUEST_COUNT = Counter(
    "teamjoin_requests_total",
    "Total HTTP requests to the team join service",
    ["method", "endpoint", "status"],
)
REQUEST_LATENCY = Histogram(
    "teamjoin_request_duration_seconds",
    "Request latency in seconds",
    ["method", "endpoint"],
)
HTTP_ERRORS = Counter(
    "teamjoin_http_errors_total",
    "Total HTTP error responses",
    ["method", "endpoint", "status"],
)

# ── Business Metrics (updated by service layer only) ──
JOIN_PASSES = Counter(
    "teamjoin_passes_total",
    "Total join passes executed",
    ["mode"],
)
JOIN_DURATION = Histogram(
    "teamjoin_pass_duration_seconds",
    "Time to run one join pass end-to-end",
    buckets=[0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0],
)
UNKNOWN_MEMBERS = Counter(
    "teamjoin_unknown_members_total",
    "Team list references that matched no team member",
)
PROJECTS_HELD = Counter(
    "teamjoin_projects_held_total",
    "Projects removed in public mode because they are on hold",
)
SNIPPETS_DROPPED = Counter(
    "teamjoin_snippets_dropped_total",
    "Snippets dropped in public mode because the author is unknown",
)
SNIPPET_FAILURES = Counter(
    "teamjoin_snippet_failures_total",
    "Join passes aborted by an unknown snippet author",
)
