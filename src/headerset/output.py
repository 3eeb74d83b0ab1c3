"""Rendering and writing of resolved header sets."""

from __future__ import annotations

import json
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from strif import atomic_output_file

from headerset.resolution.types import HeaderRecord


def format_text(headers: Sequence[HeaderRecord], include_excluded: bool = False) -> str:
    """One line per header: `<class> <path>` plus `[umbrella]`, `[extra]`, `[excluded]` markers."""
    lines: list[str] = []
    for header in headers:
        if header.is_excluded and not include_excluded:
            continue
        markers = [
            name
            for name, flag in (
                ("umbrella", header.is_umbrella),
                ("extra", header.is_extra),
                ("excluded", header.is_excluded),
            )
            if flag
        ]
        suffix = "".join(f" [{m}]" for m in markers)
        lines.append(f"{header.visibility.value} {header.path}{suffix}")
    return "".join(line + "\n" for line in lines)


def format_json(headers: Sequence[HeaderRecord], include_excluded: bool = False) -> str:
    """A version 3 file list, with resolution flags on each entry."""
    entries: list[dict[str, Any]] = []
    for header in headers:
        if header.is_excluded and not include_excluded:
            continue
        entry: dict[str, Any] = {"type": header.visibility.value, "path": header.path}
        if header.language:
            entry["language"] = header.language
        if header.include_name:
            entry["includeName"] = header.include_name
        entry["umbrella"] = header.is_umbrella
        entry["extra"] = header.is_extra
        if include_excluded:
            entry["excluded"] = header.is_excluded
        entries.append(entry)
    return json.dumps({"version": "3", "headers": entries}, indent=2) + "\n"


def write_output(output: str, content: str) -> None:
    """Write to stdout for `-`, otherwise atomically to the named file."""
    if output == "-":
        sys.stdout.write(content)
        return
    with atomic_output_file(Path(output), make_parents=True) as temp_path:
        Path(temp_path).write_text(content, encoding="utf-8")
