"""Known Proton runtime app IDs."""

from types import MappingProxyType
from typing import Mapping, Optional

# Runtime packages the store catalog does not describe usefully
KNOWN_RUNTIMES: Mapping[int, str] = MappingProxyType({
    1493710: "Proton Experimental",
    2805730: "Proton 9.0",
})


def get_runtime_name(app_id: int) -> Optional[str]:
    """
    Get the display name of a known Proton runtime.

    Args:
        app_id: Steam app ID

    Returns:
        Runtime name, or None if app_id is not a known runtime
    """
    return KNOWN_RUNTIMES.get(app_id)


def is_runtime(app_id: int) -> bool:
    """Check whether app_id is a known Proton runtime."""
    return app_id in KNOWN_RUNTIMES
