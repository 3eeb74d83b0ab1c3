"""
Filesystem probes used during resolution.

All lookups are read-only and uncached; repeated probes of the same path
are allowed.
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import NamedTuple, Protocol

import pathspec

from headerset.resolution.defaults import HEADER_PATTERNS


class FileIdentity(NamedTuple):
    """Identity of a file on disk, independent of the path spelling used to reach it."""

    device: int
    inode: int


class FileSystem(Protocol):
    def is_file(self, path: str) -> bool: ...

    def is_dir(self, path: str) -> bool: ...

    def make_absolute(self, path: str) -> str: ...

    def file_identity(self, path: str) -> FileIdentity | None: ...

    def enumerate_headers(self, directory: str) -> list[str]: ...


class LocalFileSystem:
    """`FileSystem` backed by the local disk."""

    def __init__(self, header_patterns: Sequence[str] = HEADER_PATTERNS) -> None:
        self._header_spec: pathspec.PathSpec = pathspec.PathSpec.from_lines(
            "gitignore", header_patterns
        )

    def is_file(self, path: str) -> bool:
        return Path(path).is_file()

    def is_dir(self, path: str) -> bool:
        return Path(path).is_dir()

    def make_absolute(self, path: str) -> str:
        # Symlinks are kept as spelled; only identity checks look through them.
        return os.path.abspath(path)

    def file_identity(self, path: str) -> FileIdentity | None:
        try:
            st = os.stat(path)
        except OSError:
            return None
        return FileIdentity(st.st_dev, st.st_ino)

    def enumerate_headers(self, directory: str) -> list[str]:
        """All header files below `directory`, sorted."""
        return sorted(self._walk_headers(Path(directory)))

    def _walk_headers(self, root: Path) -> Iterable[str]:
        for dirpath, _dirnames, filenames in os.walk(root):
            current = Path(dirpath)
            for filename in filenames:
                if not self._header_spec.match_file(filename):
                    continue
                filepath = current / filename
                # Broken symlinks
                if not filepath.exists():
                    continue
                yield str(filepath)


def expand_directories(paths: Iterable[str], fs: FileSystem) -> list[str]:
    """
    Replace every path naming a directory with the headers found below it.
    Other paths pass through unchanged and in order.
    """
    result: list[str] = []
    for path in paths:
        if fs.is_dir(path):
            result.extend(fs.enumerate_headers(path))
        else:
            result.append(path)
    return result
