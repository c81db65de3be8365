"""
Observability helpers: structured logging and health checks.

Usage
-----
>>> from blogapp.monitoring import configure_logging, setup_health_routes
>>> configure_logging()
>>> setup_health_routes(app)
"""

from blogapp.monitoring.health import (
    CheckStatus,
    ComponentCheck,
    HealthChecker,
    HealthStatus,
    OverallStatus,
    setup_health_routes,
)
from blogapp.monitoring.logging import (
    bind_request_id,
    clear_context,
    configure_logging,
    get_logger,
    get_request_id,
    redact_pii,
    sanitize_headers,
    sanitize_log_message,
)

__all__ = [
    "CheckStatus",
    "ComponentCheck",
    "HealthChecker",
    "HealthStatus",
    "OverallStatus",
    "bind_request_id",
    "clear_context",
    "configure_logging",
    "get_logger",
    "get_request_id",
    "redact_pii",
    "sanitize_headers",
    "sanitize_log_message",
    "setup_health_routes",
]
