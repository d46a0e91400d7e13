"""
Workflow orchestrator for compatscan analysis runs.

Coordinates the complete analysis:
1. Discover Steam libraries
2. Scan compatdata directories
3. Look up each app in the store catalog
4. Hand each reconciled record to the reporter
"""

import asyncio
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Optional, Set

from ..api.client import StoreClient
from ..api.runtimes import is_runtime
from ..scanner.library_scanner import get_libraries, scan_compatdata
from ..scanner.library_types import ApplicationRecord, CompatibilityEntry, Library

logger = logging.getLogger(__name__)

DEFAULT_REQUEST_DELAY = 0.2


@dataclass
class AnalysisResult:
    """Result of analysing one Steam installation."""
    steam_root: Path
    libraries: List[Library]
    records: List[ApplicationRecord] = field(default_factory=list)
    runtimes_found: List[int] = field(default_factory=list)

    @property
    def installed_apps(self) -> Set[int]:
        """Union of installed app IDs across all libraries."""
        installed: Set[int] = set()
        for library in self.libraries:
            installed.update(library.installed_apps)
        return installed


class AnalysisOrchestrator:
    """
    Orchestrates a compatdata analysis run.

    Lookups are strictly sequential. After every compatdata entry the
    orchestrator sleeps for ``request_delay`` seconds to stay under the
    store's informal rate limit.
    """

    def __init__(
        self,
        api_client: StoreClient,
        steam_root: Path,
        request_delay: float = DEFAULT_REQUEST_DELAY,
        reporter: Optional[Any] = None
    ):
        """
        Initialize analysis orchestrator.

        Args:
            api_client: Configured store catalog client
            steam_root: Steam installation root
            request_delay: Seconds to sleep after each compatdata entry
            reporter: Optional reporter with ``libraries_found(libraries)``
                and ``record_processed(record)`` hooks
        """
        self.api_client = api_client
        self.steam_root = steam_root
        self.request_delay = request_delay
        self.reporter = reporter

    async def run(self) -> AnalysisResult:
        """
        Run the analysis.

        Returns:
            AnalysisResult with one record per compatdata entry

        Raises:
            LibraryError: If the root library manifest cannot be read
        """
        libraries = get_libraries(self.steam_root)
        result = AnalysisResult(steam_root=self.steam_root, libraries=libraries)

        if self.reporter:
            self.reporter.libraries_found(libraries)

        installed = result.installed_apps
        entries = self._collect_entries(libraries)
        logger.info(f"Analysing {len(entries)} compatdata entries")

        runtimes: Set[int] = set()
        for entry in entries:
            record = await self.process_entry(entry, installed)
            result.records.append(record)

            if record.is_runtime:
                runtimes.add(record.app_id)

            if self.reporter:
                self.reporter.record_processed(record)

            await asyncio.sleep(self.request_delay)

        result.runtimes_found = sorted(runtimes)
        return result

    async def process_entry(
        self,
        entry: CompatibilityEntry,
        installed: Set[int]
    ) -> ApplicationRecord:
        """
        Reconcile one compatdata entry with local and catalog state.

        Args:
            entry: Compatdata entry from the scanner
            installed: Installed app IDs across all libraries

        Returns:
            ApplicationRecord for the entry
        """
        lookup = await self.api_client.fetch_app_info(entry.app_id)

        record = ApplicationRecord(
            app_id=entry.app_id,
            path=entry.path,
            installed=entry.app_id in installed,
            fetched=lookup is not None,
            is_runtime=is_runtime(entry.app_id),
        )
        if lookup is not None:
            record.success = lookup.success
            record.name = lookup.name
        else:
            logger.info(f"Failed to fetch app info for {entry.app_id}")

        return record

    def _collect_entries(self, libraries: List[Library]) -> List[CompatibilityEntry]:
        """Scan compatdata for every library, in library order."""
        entries = []
        for library in libraries:
            logger.debug(f"Scanning compatdata of library {library.path}")
            entries.extend(scan_compatdata(library.path))
        return entries
