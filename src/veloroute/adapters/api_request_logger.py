"""Logging of outgoing API requests when VELOROUTE_LOG_REQUESTS is enabled."""

import logging
import os
from typing import Any
from urllib.parse import urlencode

logger = logging.getLogger(__name__)

REDACTED = "***REDACTED***"
_SECRET_PARAMS = {"access_token", "api_key", "key", "token"}


def should_log_requests() -> bool:
    """Check if request logging is enabled via the VELOROUTE_LOG_REQUESTS variable."""
    return os.getenv("VELOROUTE_LOG_REQUESTS", "").lower() == "true"


def redact_params(params: dict[str, Any] | None) -> dict[str, Any]:
    """Replace secret query parameters such as the Mapbox token."""
    if not params:
        return {}
    return {k: REDACTED if k.lower() in _SECRET_PARAMS else v for k, v in params.items()}


def log_api_request(method: str, url: str, params: dict[str, Any] | None = None) -> None:
    """Log an outgoing request with secrets redacted, if request logging is enabled.

    Args:
        method: HTTP method.
        url: Request URL without query string.
        params: Query parameters.
    """
    if not should_log_requests():
        return

    safe_params = redact_params(params)
    query = urlencode(sorted(safe_params.items()), safe="*,") if safe_params else ""
    logger.info(f"API Request: {method} {url}{'?' + query if query else ''}")
