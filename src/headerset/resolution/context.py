"""
ResolutionContext: runs the header resolution pipeline.

    build (base + extra headers) → exclude → designate umbrellas

The first fatal error stops the pipeline. The result still carries the
headers built up to that point, so callers must check `ResolutionResult.ok`
(or call `unwrap()`) rather than rely on the header list alone.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from headerset.log import get_logger
from headerset.resolution.builder import HeaderSetBuilder
from headerset.resolution.diagnostics import (
    Diagnostic,
    HeaderResolutionError,
    Severity,
)
from headerset.resolution.exclusion import ExclusionResolver
from headerset.resolution.filesystem import FileSystem, LocalFileSystem
from headerset.resolution.naming import IncludeNamer, create_include_name
from headerset.resolution.types import HeaderDirectives, HeaderRecord, VisibilityClass
from headerset.resolution.umbrella import UmbrellaResolver

log = get_logger(__name__)


@dataclass
class ResolutionResult:
    """Resolved headers plus every diagnostic reported while resolving them."""

    headers: list[HeaderRecord] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)
    # Set by `fail()`; `unwrap()` re-raises it.
    _error: HeaderResolutionError | None = field(default=None, repr=False, compare=False)

    @property
    def ok(self) -> bool:
        return not self.errors

    @property
    def errors(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.severity is Severity.error]

    @property
    def warnings(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.severity is Severity.warning]

    @property
    def included(self) -> list[HeaderRecord]:
        """Headers not flagged as excluded, in order."""
        return [h for h in self.headers if not h.is_excluded]

    @property
    def umbrella_headers(self) -> dict[VisibilityClass, HeaderRecord]:
        return {h.visibility: h for h in reversed(self.headers) if h.is_umbrella}

    def fail(self, error: HeaderResolutionError) -> None:
        """Record the error that stopped resolution."""
        self.diagnostics.append(error.to_diagnostic())
        self._error = error

    def unwrap(self) -> list[HeaderRecord]:
        """Return the headers, or raise the error that stopped resolution."""
        if self._error is not None:
            raise self._error
        return self.headers


class ResolutionContext:
    """
    Owns the header sequence for one resolution run.

    `default_extra` seeds the extra headers per class; a class present in
    `HeaderDirectives.extra` replaces its defaults.
    """

    def __init__(
        self,
        fs: FileSystem | None = None,
        include_namer: IncludeNamer = create_include_name,
        default_extra: Mapping[VisibilityClass, Sequence[str]] | None = None,
    ) -> None:
        self._fs: FileSystem = fs if fs is not None else LocalFileSystem()
        self._builder: HeaderSetBuilder = HeaderSetBuilder(self._fs, include_namer, default_extra)
        self._excluder: ExclusionResolver = ExclusionResolver(self._fs)
        self._umbrellas: UmbrellaResolver = UmbrellaResolver()

    def run(
        self, base_headers: Sequence[HeaderRecord], directives: HeaderDirectives
    ) -> ResolutionResult:
        result = ResolutionResult(headers=list(base_headers))
        try:
            self._builder.extend(result.headers, directives.extra)
            report = self._excluder.resolve(result.headers, directives.exclude)
            result.diagnostics.extend(report.warnings)
            self._umbrellas.resolve(
                result.headers, directives.umbrella, directives.framework_name
            )
        except HeaderResolutionError as e:
            log.debug("resolution stopped: %s", e.message)
            result.fail(e)
        return result

    def run_file_lists(
        self, file_lists: Sequence[str], directives: HeaderDirectives
    ) -> ResolutionResult:
        """Load base headers from JSON file lists, then `run()`."""
        from headerset.filelist import load_file_lists

        try:
            base_headers = load_file_lists(file_lists)
        except HeaderResolutionError as e:
            result = ResolutionResult()
            result.fail(e)
            return result
        return self.run(base_headers, directives)
