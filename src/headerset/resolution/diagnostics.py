"""
Errors and diagnostics reported by header resolution.

Components raise `HeaderResolutionError` subclasses. `ResolutionContext`
turns them into `Diagnostic` records so callers get one list of errors and
warnings alongside whatever headers were built.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from headerset.resolution.types import VisibilityClass


class DiagnosticKind(str, Enum):
    missing_file = "missing_file"
    no_such_header_file = "no_such_header_file"
    no_such_umbrella_header = "no_such_umbrella_header"
    glob_did_not_match = "glob_did_not_match"
    cannot_open_file = "cannot_open_file"


class Severity(str, Enum):
    error = "error"
    warning = "warning"


_WARNING_KINDS = frozenset({DiagnosticKind.glob_did_not_match})


@dataclass(frozen=True)
class Diagnostic:
    kind: DiagnosticKind
    message: str
    path: str | None = None
    visibility: VisibilityClass | None = None

    @property
    def severity(self) -> Severity:
        return Severity.warning if self.kind in _WARNING_KINDS else Severity.error

    def __str__(self) -> str:
        return f"{self.severity.value}: {self.message}"


def _describe(visibility: VisibilityClass | None) -> str:
    if visibility is None or visibility is VisibilityClass.unspecified:
        return ""
    return f"{visibility.value} "


class HeaderResolutionError(Exception):
    """Base class for fatal resolution errors."""

    kind: DiagnosticKind = DiagnosticKind.cannot_open_file

    def __init__(
        self, message: str, path: str | None = None, visibility: VisibilityClass | None = None
    ) -> None:
        super().__init__(message)
        self.message: str = message
        self.path: str | None = path
        self.visibility: VisibilityClass | None = visibility

    def to_diagnostic(self) -> Diagnostic:
        return Diagnostic(
            kind=self.kind, message=self.message, path=self.path, visibility=self.visibility
        )


class MissingFileError(HeaderResolutionError):
    """An extra header path does not name an existing file."""

    kind = DiagnosticKind.missing_file

    def __init__(self, path: str, visibility: VisibilityClass) -> None:
        super().__init__(f"no such {_describe(visibility)}header file: {path!r}", path, visibility)


class NoSuchHeaderFileError(HeaderResolutionError):
    """An exclusion path is neither a glob nor an existing file."""

    kind = DiagnosticKind.no_such_header_file

    def __init__(self, path: str, visibility: VisibilityClass) -> None:
        super().__init__(
            f"no such {_describe(visibility)}header file to exclude: {path!r}", path, visibility
        )


class NoSuchUmbrellaHeaderError(HeaderResolutionError):
    """An explicit umbrella header path matched no input header of its class."""

    kind = DiagnosticKind.no_such_umbrella_header

    def __init__(self, path: str, visibility: VisibilityClass) -> None:
        super().__init__(
            f"{_describe(visibility)}umbrella header file not found in input: {path!r}",
            path,
            visibility,
        )


class FileListError(HeaderResolutionError):
    """A header file list could not be read or parsed."""

    kind = DiagnosticKind.cannot_open_file

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"cannot open file list {path!r}: {reason}", path)
        self.reason: str = reason


def glob_did_not_match(pattern: str, visibility: VisibilityClass) -> Diagnostic:
    return Diagnostic(
        kind=DiagnosticKind.glob_did_not_match,
        message=f"{_describe(visibility)}glob {pattern!r} did not match any header file",
        path=pattern,
        visibility=visibility,
    )
