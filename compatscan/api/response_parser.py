"""Steam store appdetails response parsing and validation."""

import json
from typing import Any, Dict, NamedTuple, Optional


class ResponseError(Exception):
    """Response parsing errors."""
    pass


class AppLookup(NamedTuple):
    """Result of a catalog lookup for one app."""
    success: bool
    name: str


UNKNOWN_NAME = "Unknown"
UNKNOWN_APPLICATION = "Unknown Application"


def validate_response(response_text: str) -> Dict[str, Any]:
    """
    Validate and parse an appdetails response body.

    Args:
        response_text: Response body as text

    Returns:
        Parsed JSON object

    Raises:
        ResponseError: If the body is not a JSON object
    """
    if not response_text:
        raise ResponseError("Empty response body received")

    try:
        document = json.loads(response_text)
    except ValueError as e:
        raise ResponseError(f"Malformed JSON: {e}")

    if not isinstance(document, dict):
        raise ResponseError(
            f"Invalid document: expected object, got {type(document).__name__}"
        )

    return document


def parse_app_details(document: Dict[str, Any], app_id: int) -> Optional[AppLookup]:
    """
    Extract success flag and name for one app.

    ``success`` must be a JSON boolean and ``data.name`` a string;
    anything else falls back to the defaults.

    Args:
        document: Parsed appdetails response
        app_id: App ID that was requested

    Returns:
        AppLookup, or None if the document has no entry for app_id
    """
    key = str(app_id)
    if key not in document:
        return None

    app_data = document[key]
    if not isinstance(app_data, dict):
        app_data = {}

    success = app_data.get("success")
    if not isinstance(success, bool):
        success = False

    if not success:
        return AppLookup(False, UNKNOWN_APPLICATION)

    data = app_data.get("data")
    name = data.get("name") if isinstance(data, dict) else None
    if not isinstance(name, str):
        name = UNKNOWN_NAME

    return AppLookup(True, name)
