"""
Shared pytest fixtures and utilities for the compatscan test suite.
"""

from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Optional

import pytest
import yaml


def render_library_folders(folders: List[Dict[str, Any]]) -> str:
    """
    Render libraryfolders.vdf text the way Steam writes it.

    Each folder dict has a ``path`` and optional ``apps`` (list of IDs).
    """
    lines = ['"libraryfolders"', '{']
    for index, folder in enumerate(folders):
        lines.append(f'\t"{index}"')
        lines.append('\t{')
        lines.append(f'\t\t"path"\t\t"{folder["path"]}"')
        lines.append('\t\t"label"\t\t""')
        lines.append('\t\t"contentid"\t\t"1234567890"')
        lines.append('\t\t"apps"')
        lines.append('\t\t{')
        for app_id in folder.get("apps", []):
            lines.append(f'\t\t\t"{app_id}"\t\t"1048576"')
        lines.append('\t\t}')
        lines.append('\t}')
    lines.append('}')
    return "\n".join(lines) + "\n"


@pytest.fixture
def library_folders_vdf() -> Callable[[List[Dict[str, Any]]], str]:
    """
    Renderer for libraryfolders.vdf text.
    """
    return render_library_folders


@pytest.fixture
def make_steam_root(tmp_path: Path) -> Callable[..., Path]:
    """
    Build a fake Steam installation in the temp workspace.

    Usage:
        root = make_steam_root(apps=[440], compatdata=["440", "0"])
    """

    def _builder(
        apps: Iterable[int] = (),
        compatdata: Iterable[str] = (),
        extra_folders: Optional[List[Dict[str, Any]]] = None,
        name: str = "Steam",
        manifest: Optional[str] = None,
    ) -> Path:
        root = tmp_path / name
        steamapps = root / "steamapps"
        steamapps.mkdir(parents=True)

        if manifest is None:
            folders = [{"path": str(root), "apps": list(apps)}]
            folders.extend(extra_folders or [])
            manifest = render_library_folders(folders)
        (steamapps / "libraryfolders.vdf").write_text(manifest)

        for dirname in compatdata:
            (steamapps / "compatdata" / dirname).mkdir(parents=True)

        return root

    return _builder


@pytest.fixture
def make_config(tmp_path: Path) -> Callable[[Dict[str, Any]], Path]:
    """
    Create a compatscan.yaml in a temp directory.

    Usage:
        path = make_config({"api": {"request_delay": 0}})
    """

    def _builder(overrides: Optional[Dict[str, Any]] = None) -> Path:
        base = {
            "api": {"request_delay": 0},
            "logging": {"console": False},
        }
        if overrides:
            base = merge_dicts(base, overrides)

        cfg_path = tmp_path / "compatscan.yaml"
        cfg_path.write_text(yaml.safe_dump(base))
        return cfg_path

    return _builder


def merge_dicts(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow+deep merge helper for fixture config dictionaries.
    """
    result: Dict[str, Any] = dict(base)
    for key, value in override.items():
        if (
            key in result
            and isinstance(result[key], dict)
            and isinstance(value, dict)
        ):
            result[key] = merge_dicts(result[key], value)
        else:
            result[key] = value
    return result
