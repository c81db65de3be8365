from blogapp.managers.metrics import RequestTimer, get_system_metrics, metrics_manager
from blogapp.managers.password_manager import (
    hash_password,
    verify_and_update_password,
    verify_password,
)
from blogapp.managers.rate_limiter import limiter, rate_limit_exceeded_handler
from blogapp.managers.token_manager import create_access_token, decode_access_token

__all__ = [
    "RequestTimer",
    "create_access_token",
    "decode_access_token",
    "get_system_metrics",
    "hash_password",
    "limiter",
    "metrics_manager",
    "rate_limit_exceeded_handler",
    "verify_and_update_password",
    "verify_password",
]
