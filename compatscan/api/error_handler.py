"""Error types and HTTP status descriptions for Steam store catalog requests."""

import logging

logger = logging.getLogger(__name__)


class CatalogError(Exception):
    """Base exception for catalog errors."""
    pass


class CatalogRequestError(CatalogError):
    """Request could not be completed (network failure, timeout, bad body)."""
    pass


# The store answers most failures with a non-JSON body, so status codes
# are only descriptive
HTTP_STATUS_MESSAGES = {
    200: "Success",
    400: "Malformed request",
    403: "Access denied",
    404: "Not found",
    429: "Rate limited",
    500: "Server error",
    502: "Bad gateway",
    503: "Service unavailable",
}


def get_error_message(status_code: int) -> str:
    """
    Get user-friendly message for HTTP status code.

    Args:
        status_code: HTTP status code

    Returns:
        Message string
    """
    return HTTP_STATUS_MESSAGES.get(
        status_code,
        f"Unknown status (HTTP {status_code})"
    )


def log_http_status(status_code: int, context: str = "") -> None:
    """
    Log a non-success HTTP status without raising.

    Args:
        status_code: HTTP status code from the catalog
        context: Additional context for the log message
    """
    if status_code == 200:
        return

    msg = get_error_message(status_code)
    if context:
        msg = f"{msg} ({context})"

    if status_code == 429:
        logger.warning(f"Catalog request throttled: {msg}")
    else:
        logger.debug(f"Catalog returned HTTP {status_code}: {msg}")
