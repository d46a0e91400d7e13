"""Steam installation, library and compatdata scanning."""

import logging
import os
from pathlib import Path
from typing import List, Optional, Set

from compatscan.scanner.library_types import Library, CompatibilityEntry
from compatscan.scanner.vdf_parser import (
    parse_app_id,
    parse_section_ids,
    iter_library_paths,
)

logger = logging.getLogger(__name__)

# Relative to $HOME, in order of preference
FLATPAK_STEAM_DIR = Path(".var/app/com.valvesoftware.Steam/.local/share/Steam")
STANDARD_STEAM_DIR = Path(".local/share/Steam")

LIBRARY_MANIFEST = Path("steamapps") / "libraryfolders.vdf"
COMPATDATA_DIR = Path("steamapps") / "compatdata"

# Steam reserves compatdata/0; it never belongs to an app
RESERVED_APP_ID = 0


class ScannerError(Exception):
    """Steam scanning errors."""
    pass


class SteamPathError(ScannerError):
    """Steam installation could not be located."""
    pass


class LibraryError(ScannerError):
    """Root library manifest could not be read."""
    pass


def find_steam_root(home: Optional[str] = None) -> Path:
    """
    Locate the Steam installation root.

    The Flatpak install is preferred over the standard one when both
    exist. When neither exists the standard location is returned so the
    caller reports the missing manifest.

    Args:
        home: Home directory (default: $HOME)

    Returns:
        Path to the Steam root

    Raises:
        SteamPathError: If no home directory is available
    """
    if home is None:
        home = os.environ.get("HOME")
    if not home:
        raise SteamPathError("HOME environment variable is not set")

    candidates = [Path(home) / FLATPAK_STEAM_DIR, Path(home) / STANDARD_STEAM_DIR]
    for candidate in candidates:
        if candidate.exists():
            logger.debug(f"Found Steam installation at {candidate}")
            return candidate

    logger.debug(f"No Steam installation found, defaulting to {candidates[-1]}")
    return candidates[-1]


def parse_installed_apps(manifest_path: Path) -> Set[int]:
    """
    Read the set of installed app IDs from a library manifest.

    Args:
        manifest_path: Path to libraryfolders.vdf

    Returns:
        Set of app IDs; empty if the manifest cannot be read
    """
    try:
        text = manifest_path.read_text(encoding="utf-8", errors="ignore")
    except OSError as e:
        logger.debug(f"Could not read manifest {manifest_path}: {e}")
        return set()

    return parse_section_ids(text, "apps")


def get_libraries(steam_root: Path) -> List[Library]:
    """
    Discover the root library and every additional library it declares.

    A declared path is kept only if it exists and is not the root itself.
    An unreadable root manifest aborts discovery, while an unreadable
    manifest in an additional library only leaves that library with no
    installed apps.

    Args:
        steam_root: Steam installation root

    Returns:
        Libraries with the root first, the rest in manifest order

    Raises:
        LibraryError: If the root manifest cannot be read
    """
    manifest_path = steam_root / LIBRARY_MANIFEST
    try:
        text = manifest_path.read_text(encoding="utf-8", errors="ignore")
    except OSError as e:
        raise LibraryError(f"Failed to read library manifest {manifest_path}: {e}")

    libraries = [
        Library(path=steam_root, installed_apps=frozenset(parse_section_ids(text, "apps")))
    ]

    # Steam writes absolute paths; the root may be relative or a symlink
    resolved_root = steam_root.resolve()

    for path in iter_library_paths(text):
        if path == steam_root or path.resolve() == resolved_root:
            continue
        if not path.exists():
            logger.info(f"Library folder not found, skipping: {path}")
            continue

        installed = parse_installed_apps(path / LIBRARY_MANIFEST)
        libraries.append(Library(path=path, installed_apps=frozenset(installed)))

    logger.info(f"Discovered {len(libraries)} Steam libraries under {steam_root}")
    return libraries


def scan_compatdata(library_root: Path) -> List[CompatibilityEntry]:
    """
    List the compatdata directories of a library.

    Entries whose name is not an app ID, and the reserved ``0`` entry,
    are skipped. A missing or unreadable compatdata directory is not an
    error.

    Args:
        library_root: Library root (contains steamapps/)

    Returns:
        Entries sorted by app ID
    """
    compatdata_path = library_root / COMPATDATA_DIR

    try:
        children = list(compatdata_path.iterdir())
    except OSError as e:
        logger.debug(f"No compatdata for library {library_root}: {e}")
        return []

    entries = []
    for child in children:
        app_id = parse_app_id(child.name)
        if app_id is None or app_id == RESERVED_APP_ID:
            continue
        if not child.is_dir():
            continue
        entries.append(CompatibilityEntry(path=child, app_id=app_id))

    entries.sort(key=lambda entry: entry.app_id)
    logger.info(f"Found {len(entries)} compatdata entries in {compatdata_path}")
    return entries
