"""Steam library type definitions and data structures."""

from dataclasses import dataclass
from pathlib import Path
from typing import FrozenSet, Optional


@dataclass(frozen=True)
class Library:
    """
    A Steam library folder.

    The root installation is always a library; additional libraries are
    declared by "path" entries in the root's libraryfolders.vdf.
    """
    path: Path                                      # Library root (contains steamapps/)
    installed_apps: FrozenSet[int] = frozenset()    # App IDs listed in the manifest


@dataclass(frozen=True)
class CompatibilityEntry:
    """A compatdata directory named by an application ID."""
    path: Path      # Absolute path to compatdata/<app_id>
    app_id: int     # Parsed from the directory name (never 0)


@dataclass
class ApplicationRecord:
    """
    Reconciled view of one compatdata entry.

    Built by the orchestrator for each entry and handed to the report
    renderer. ``fetched`` is False when the catalog returned no usable data,
    which is reported differently from an app the catalog does not know.
    """
    app_id: int
    path: Path
    installed: bool
    fetched: bool
    success: bool = False
    name: Optional[str] = None
    is_runtime: bool = False

    @property
    def display_name(self) -> str:
        """Name to show in the report."""
        if not self.fetched:
            return "Failed to fetch app info"
        if not self.success:
            return "Unknown Application"
        return self.name if self.name is not None else "Unknown"
