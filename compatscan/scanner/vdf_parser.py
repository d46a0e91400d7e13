"""Line-oriented parsing of Steam VDF manifest text."""

from pathlib import Path
from typing import Iterator, Optional, Set


def parse_app_id(value: str) -> Optional[int]:
    """
    Parse an application ID.

    Only plain decimal digits are accepted (no sign, no whitespace).

    Args:
        value: Candidate ID string

    Returns:
        Non-negative integer ID, or None if value is not an ID
    """
    if not value or not value.isascii() or not value.isdigit():
        return None
    return int(value)


def parse_section_ids(text: str, section: str = "apps") -> Set[int]:
    """
    Collect the numeric keys of a named section in VDF text.

    Expects the layout Steam writes: the quoted section name on its own
    line, an opening brace, one quoted key/value pair per line and a
    closing brace on its own line. The section may occur more than once
    (libraryfolders.vdf has one "apps" block per folder); keys from every
    occurrence are collected. Nested blocks inside the section are not
    supported.

    Args:
        text: Manifest file contents
        section: Section name without quotes

    Returns:
        Set of application IDs found in the section
    """
    marker = f'"{section}"'
    ids = set()
    in_section = False

    for line in text.splitlines():
        line = line.strip()

        if line == marker:
            in_section = True
            continue

        if in_section and line == "}":
            in_section = False
            continue

        if in_section and line.startswith('"'):
            fields = line.split('"')
            if len(fields) > 1:
                app_id = parse_app_id(fields[1])
                if app_id is not None:
                    ids.add(app_id)

    return ids


def iter_library_paths(text: str) -> Iterator[Path]:
    """
    Yield library folder paths declared in libraryfolders.vdf text.

    A "path" line starts a pending entry; the entry is yielded when the
    next closing brace line is reached. A pending path with no closing
    brace after it is dropped.

    Args:
        text: Manifest file contents

    Yields:
        Path for each declared library folder, in manifest order
    """
    current_path = None

    for line in text.splitlines():
        line = line.strip()

        if line.startswith('"path"'):
            fields = line.split('"')
            # Path('') would resolve to the working directory
            if len(fields) > 3 and fields[3]:
                current_path = Path(fields[3])

        if line == "}" and current_path is not None:
            yield current_path
            current_path = None
