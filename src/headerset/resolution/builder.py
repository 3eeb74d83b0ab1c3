"""Builds the working header sequence from base headers and extra-header directives."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from headerset.log import get_logger
from headerset.resolution.defaults import RESOLUTION_ORDER
from headerset.resolution.diagnostics import MissingFileError
from headerset.resolution.filesystem import FileSystem, LocalFileSystem, expand_directories
from headerset.resolution.naming import IncludeNamer, create_include_name
from headerset.resolution.types import HeaderRecord, VisibilityClass

log = get_logger(__name__)


class HeaderSetBuilder:
    """
    Appends extra headers to a base header sequence.

    `defaults` holds pre-seeded extra headers per class (e.g. from a config
    file). A class present in the `additive` mapping passed to `build()`
    replaces its defaults entirely, even with an empty list.

    No deduplication happens here: the same file may appear more than once,
    under the same or different classes.
    """

    def __init__(
        self,
        fs: FileSystem | None = None,
        include_namer: IncludeNamer = create_include_name,
        defaults: Mapping[VisibilityClass, Sequence[str]] | None = None,
    ) -> None:
        self._fs: FileSystem = fs if fs is not None else LocalFileSystem()
        self._include_namer: IncludeNamer = include_namer
        self._defaults: dict[VisibilityClass, list[str]] = {
            k: list(v) for k, v in (defaults or {}).items()
        }

    def effective_additive(
        self, additive: Mapping[VisibilityClass, Sequence[str]]
    ) -> dict[VisibilityClass, list[str]]:
        """Per-class extra paths after applying replacement over the defaults."""
        merged: dict[VisibilityClass, list[str]] = {}
        for visibility in RESOLUTION_ORDER:
            if visibility in additive:
                merged[visibility] = list(additive[visibility])
            elif visibility in self._defaults:
                merged[visibility] = list(self._defaults[visibility])
        return merged

    def build(
        self,
        base_headers: Sequence[HeaderRecord],
        additive: Mapping[VisibilityClass, Sequence[str]],
    ) -> list[HeaderRecord]:
        """
        Return `base_headers` followed by one extra record per additive path,
        classes in public, private, project order.

        Raises `MissingFileError` for a path that is not an existing file.
        """
        headers = list(base_headers)
        self.extend(headers, additive)
        return headers

    def extend(
        self,
        headers: list[HeaderRecord],
        additive: Mapping[VisibilityClass, Sequence[str]],
    ) -> None:
        """Append extra records to `headers` in place, keeping those added before a failure."""
        for visibility, paths in self.effective_additive(additive).items():
            for path in expand_directories(paths, self._fs):
                if not self._fs.is_file(path):
                    raise MissingFileError(path, visibility)
                full_path = self._fs.make_absolute(path)
                headers.append(
                    HeaderRecord(
                        path=full_path,
                        visibility=visibility,
                        include_name=self._include_namer(full_path),
                        is_extra=True,
                    )
                )
                log.debug("added extra %s header %s", visibility.value, full_path)
