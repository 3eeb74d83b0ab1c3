"""
Header set resolution: builds the ordered, classified header sequence of a
library from base headers and extra, exclude and umbrella directives.

Usage::

    from headerset.resolution import (
        Directive,
        HeaderDirectives,
        ResolutionContext,
        VisibilityClass,
    )

    directives = HeaderDirectives(
        extra={VisibilityClass.private: ["Sources/FooPrivate.h"]},
        exclude=[Directive("/src/**/*Internal.h", VisibilityClass.public)],
        umbrella={},
        framework_name="Foo",
    )
    result = ResolutionContext().run(base_headers, directives)
    if result.ok:
        headers = result.included
"""

from headerset.resolution.builder import HeaderSetBuilder
from headerset.resolution.context import ResolutionContext, ResolutionResult
from headerset.resolution.diagnostics import (
    Diagnostic,
    DiagnosticKind,
    FileListError,
    HeaderResolutionError,
    MissingFileError,
    NoSuchHeaderFileError,
    NoSuchUmbrellaHeaderError,
    Severity,
)
from headerset.resolution.exclusion import ExclusionReport, ExclusionResolver
from headerset.resolution.filesystem import FileIdentity, FileSystem, LocalFileSystem
from headerset.resolution.globs import NotAGlobError, PathGlob
from headerset.resolution.naming import create_include_name, framework_name_from_install_name
from headerset.resolution.types import (
    Directive,
    HeaderDirectives,
    HeaderRecord,
    VisibilityClass,
)
from headerset.resolution.umbrella import UmbrellaResolver

__all__ = [
    "Diagnostic",
    "DiagnosticKind",
    "Directive",
    "ExclusionReport",
    "ExclusionResolver",
    "FileIdentity",
    "FileListError",
    "FileSystem",
    "HeaderDirectives",
    "HeaderRecord",
    "HeaderResolutionError",
    "HeaderSetBuilder",
    "LocalFileSystem",
    "MissingFileError",
    "NoSuchHeaderFileError",
    "NoSuchUmbrellaHeaderError",
    "NotAGlobError",
    "PathGlob",
    "ResolutionContext",
    "ResolutionResult",
    "Severity",
    "UmbrellaResolver",
    "VisibilityClass",
    "create_include_name",
    "framework_name_from_install_name",
]
