"""
Console report for compatscan runs.

Renders a line-oriented, human-readable report with Rich. The layout is
for people, not for parsing.
"""

from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.text import Text

from compatscan.api.runtimes import get_runtime_name
from compatscan.scanner.library_types import ApplicationRecord, Library
from compatscan.workflow.orchestrator import AnalysisResult


NAME_WIDTH = 50

REPORT_THEME = {
    'title': 'bold green',
    'heading': 'bold',
    'runtime_heading': 'bold cyan',
    'app_id': 'blue',
    'path': 'blue',
    'name': 'white',
    'runtime': 'cyan',
    'error': 'red',
    'installed': 'green',
    'not_installed': 'yellow',
}


class ReportRenderer:
    """
    Streams the analysis report to a Rich console.

    Used as the orchestrator's reporter: library and record hooks are
    printed as the run progresses, the runtime summary at the end.
    """

    def __init__(self, console: Optional[Console] = None, color: bool = True):
        """
        Initialize report renderer.

        Args:
            console: Console to print to (default: stdout)
            color: Style output; ignored when a console is given
        """
        if console is None:
            console = Console(no_color=not color, highlight=False)
        self.console = console

    def _print(self, text: Optional[Text] = None) -> None:
        if text is None:
            self.console.print()
        else:
            self.console.print(text, highlight=False, soft_wrap=True)

    def header(self, steam_root: Path) -> None:
        """Print the report title and the Steam root in use."""
        self._print(Text("Steam Compatdata Analyzer", style=REPORT_THEME['title']))

        line = Text("INFO: Using Steam path: ")
        line.append(str(steam_root), style=REPORT_THEME['path'])
        self._print(line)
        self._print()

    def libraries_found(self, libraries: List[Library]) -> None:
        """Print discovered libraries and the table heading."""
        self._print(Text(f"INFO: Found {len(libraries)} Steam libraries."))
        for library in libraries:
            self._print(Text(f"INFO: Processing library at: {library.path}"))

        self._print(Text("Analyzing compatdata directories...", style=REPORT_THEME['heading']))
        self._print(Text("=" * 35, style=REPORT_THEME['heading']))

    def record_processed(self, record: ApplicationRecord) -> None:
        """Print one compatdata entry."""
        self._print(format_record(record))

    def summary(self, result: AnalysisResult) -> None:
        """Print the Proton runtimes found and the closing line."""
        if result.runtimes_found:
            self._print()
            self._print(Text("Proton Versions Found:", style=REPORT_THEME['runtime_heading']))
            self._print(Text("=" * 22, style=REPORT_THEME['heading']))

            for app_id in result.runtimes_found:
                line = Text()
                line.append(f"{get_runtime_name(app_id):<15}", style=REPORT_THEME['runtime'])
                line.append(" | AppID: ")
                line.append(str(app_id), style=REPORT_THEME['app_id'])
                self._print(line)

        self._print()
        self._print(Text("Analysis complete!", style=REPORT_THEME['title']))


def format_record(record: ApplicationRecord) -> Text:
    """
    Format one record as a report line.

    Args:
        record: Reconciled compatdata entry

    Returns:
        Styled line: ``AppID <id> | <name> | <install status>``
    """
    if not record.fetched or not record.success:
        name_style = REPORT_THEME['error']
    elif record.is_runtime:
        name_style = REPORT_THEME['runtime']
    else:
        name_style = REPORT_THEME['name']

    if record.installed:
        status = Text("INSTALLED", style=REPORT_THEME['installed'])
    else:
        status = Text("NOT INSTALLED", style=REPORT_THEME['not_installed'])

    line = Text("AppID ")
    line.append(f"{record.app_id:>6}", style=REPORT_THEME['app_id'])
    line.append(" | ")
    line.append(f"{record.display_name:<{NAME_WIDTH}}", style=name_style)
    line.append(" | ")
    line.append_text(status)
    return line
