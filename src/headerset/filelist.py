"""
Reader for JSON header file lists.

A file list names the base headers of a library::

    {
      "version": "3",
      "headers": [
        {"type": "public", "path": "/S/Foo.framework/Headers/Foo.h"},
        {"type": "project", "path": "/src/Foo/Internal.h", "language": "objective-c"}
      ]
    }

Versions 1 and 2 allow only `public` and `private` headers; version 3 adds
`project` headers and the optional `language` key.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from headerset.resolution.diagnostics import FileListError
from headerset.resolution.types import HeaderRecord, VisibilityClass

SUPPORTED_VERSIONS = ("1", "2", "3")
LANGUAGES = ("c", "c++", "objective-c", "objective-c++")

_TYPES_BY_VERSION: dict[str, tuple[VisibilityClass, ...]] = {
    "1": (VisibilityClass.public, VisibilityClass.private),
    "2": (VisibilityClass.public, VisibilityClass.private),
    "3": (VisibilityClass.public, VisibilityClass.private, VisibilityClass.project),
}


def load_file_lists(paths: Sequence[str]) -> list[HeaderRecord]:
    """Headers from every file list, lists in the given order."""
    headers: list[HeaderRecord] = []
    for path in paths:
        headers.extend(load_file_list(path))
    return headers


def load_file_list(path: str) -> list[HeaderRecord]:
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise FileListError(path, e.strerror or str(e)) from e
    return parse_file_list(text, path)


def parse_file_list(text: str, source: str = "<string>") -> list[HeaderRecord]:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise FileListError(source, f"invalid JSON: {e.msg} (line {e.lineno})") from e
    if not isinstance(data, dict):
        raise FileListError(source, "expected a JSON object")

    version = data.get("version")
    if version not in SUPPORTED_VERSIONS:
        raise FileListError(source, f"unsupported file list version: {version!r}")

    entries = data.get("headers")
    if not isinstance(entries, list):
        raise FileListError(source, "missing 'headers' array")

    return [_parse_entry(entry, version, source) for entry in entries]


def _parse_entry(entry: Any, version: str, source: str) -> HeaderRecord:
    if not isinstance(entry, dict):
        raise FileListError(source, "header entries must be objects")

    path = entry.get("path")
    if not isinstance(path, str) or not path:
        raise FileListError(source, "header entry without 'path'")

    try:
        visibility = VisibilityClass(entry.get("type"))
    except ValueError:
        visibility = None
    if visibility not in _TYPES_BY_VERSION[version]:
        raise FileListError(
            source, f"unsupported header type {entry.get('type')!r} for {path!r} in version {version}"
        )

    language = entry.get("language")
    if language is not None:
        if version != "3":
            raise FileListError(source, f"'language' requires version 3 ({path!r})")
        if language not in LANGUAGES:
            raise FileListError(source, f"unsupported language {language!r} for {path!r}")

    return HeaderRecord(path=path, visibility=visibility, language=language)
