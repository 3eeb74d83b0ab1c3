"""
Marks excluded headers.

Exclusion directives are either globs, matched against header paths within
their visibility class, or literal paths, matched by file identity so that
symlinks and alternate spellings of the same file are caught. Excluded
headers are flagged, never removed.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from headerset.log import get_logger
from headerset.resolution.diagnostics import (
    Diagnostic,
    NoSuchHeaderFileError,
    glob_did_not_match,
)
from headerset.resolution.filesystem import (
    FileIdentity,
    FileSystem,
    LocalFileSystem,
    expand_directories,
)
from headerset.resolution.globs import NotAGlobError, PathGlob
from headerset.resolution.types import Directive, HeaderRecord

log = get_logger(__name__)


@dataclass
class ExclusionReport:
    """Compiled globs of one exclusion pass and the warnings for globs that matched nothing."""

    globs: list[PathGlob] = field(default_factory=list)
    excluded_files: set[FileIdentity] = field(default_factory=set)
    warnings: list[Diagnostic] = field(default_factory=list)


class ExclusionResolver:
    def __init__(self, fs: FileSystem | None = None) -> None:
        self._fs: FileSystem = fs if fs is not None else LocalFileSystem()

    def resolve(
        self, headers: Sequence[HeaderRecord], directives: Iterable[Directive]
    ) -> ExclusionReport:
        """
        Set `is_excluded` on every header matched by a directive.

        Raises `NoSuchHeaderFileError` for a literal path that is not an
        existing file; no header is flagged in that case.
        """
        report = self.compile(directives)

        for header in headers:
            for glob in report.globs:
                if glob.match(header):
                    header.is_excluded = True

        if report.excluded_files:
            for header in headers:
                identity = self._fs.file_identity(header.path)
                if identity is None:
                    continue
                if identity in report.excluded_files:
                    header.is_excluded = True

        for glob in report.globs:
            if not glob.matched:
                report.warnings.append(glob_did_not_match(glob.pattern, glob.visibility))

        log.debug(
            "excluded %d of %d headers",
            sum(1 for h in headers if h.is_excluded),
            len(headers),
        )
        return report

    def compile(self, directives: Iterable[Directive]) -> ExclusionReport:
        """Split directives into compiled globs and literal file identities."""
        report = ExclusionReport()
        for directive in directives:
            for pattern in expand_directories([directive.pattern], self._fs):
                try:
                    glob = PathGlob.compile(pattern, directive.visibility)
                except NotAGlobError:
                    report.excluded_files.add(self._literal_identity(directive, pattern))
                else:
                    report.globs.append(glob)
        return report

    def _literal_identity(self, directive: Directive, path: str) -> FileIdentity:
        identity = self._fs.file_identity(path) if self._fs.is_file(path) else None
        if identity is None:
            raise NoSuchHeaderFileError(path, directive.visibility)
        return identity
