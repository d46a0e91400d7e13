from io import StringIO
from pathlib import Path

import pytest
from rich.console import Console

from compatscan.scanner.library_types import ApplicationRecord, Library
from compatscan.ui.report import ReportRenderer, format_record
from compatscan.workflow.orchestrator import AnalysisResult


def _renderer():
    buffer = StringIO()
    console = Console(file=buffer, no_color=True, highlight=False, width=200)
    return ReportRenderer(console=console), buffer


def _record(**overrides):
    values = dict(app_id=440, path=Path("/compat/440"), installed=True, fetched=True,
                  success=True, name="Team Fortress 2")
    values.update(overrides)
    return ApplicationRecord(**values)


@pytest.mark.unit
def test_format_record_line_layout():
    line = format_record(_record()).plain

    assert line.startswith("AppID    440 | Team Fortress 2")
    assert line.endswith(" | INSTALLED")
    assert len(line.split(" | ")[1]) == 50


@pytest.mark.unit
def test_format_record_distinguishes_failures():
    assert "Failed to fetch app info" in format_record(_record(fetched=False, name=None)).plain
    assert "Unknown Application" in format_record(
        _record(success=False, name="Unknown Application", installed=False)
    ).plain
    assert format_record(_record(installed=False)).plain.endswith("NOT INSTALLED")


@pytest.mark.unit
def test_report_streams_sections():
    renderer, buffer = _renderer()
    root = Path("/home/user/.local/share/Steam")
    libraries = [Library(path=root)]
    result = AnalysisResult(
        steam_root=root,
        libraries=libraries,
        records=[_record(app_id=1493710, name="Proton Experimental", is_runtime=True)],
        runtimes_found=[1493710],
    )

    renderer.header(root)
    renderer.libraries_found(libraries)
    for record in result.records:
        renderer.record_processed(record)
    renderer.summary(result)

    output = buffer.getvalue()
    assert "Steam Compatdata Analyzer" in output
    assert f"INFO: Using Steam path: {root}" in output
    assert "INFO: Found 1 Steam libraries." in output
    assert "AppID 1493710 | Proton Experimental" in output
    assert "Proton Versions Found:" in output
    assert "Proton Experimental | AppID: 1493710" in output
    assert output.rstrip().endswith("Analysis complete!")


@pytest.mark.unit
def test_summary_omits_runtime_section_when_none_found():
    renderer, buffer = _renderer()

    renderer.summary(AnalysisResult(steam_root=Path("/s"), libraries=[]))

    assert "Proton Versions Found" not in buffer.getvalue()
