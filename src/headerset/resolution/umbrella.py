"""
Umbrella header designation.

For each visibility class, in public, private, project order, the first
header of that class matching the umbrella rule is marked and swapped into
the first slot not already held by an umbrella header. The front of the
sequence therefore holds the umbrella headers in class order.

Umbrella rule per class:

- An explicit umbrella path is matched literally (escaped) anywhere in the
  header path. No match is an error.
- Otherwise, given a framework name, public headers ending in `/<Name>.h`
  and private headers ending in `/<Name>Private.h` or `/<Name>_Private.h`
  qualify. No match is fine. Project headers are never inferred.

When several headers match, only the first is marked; the rest are left
alone.
"""

from __future__ import annotations

import re
from collections.abc import Mapping

from headerset.log import get_logger
from headerset.resolution.defaults import RESOLUTION_ORDER
from headerset.resolution.diagnostics import NoSuchUmbrellaHeaderError
from headerset.resolution.types import HeaderRecord, VisibilityClass

log = get_logger(__name__)


def explicit_umbrella_pattern(path: str) -> re.Pattern[str]:
    return re.compile(re.escape(path))


def framework_umbrella_pattern(
    framework_name: str, visibility: VisibilityClass
) -> re.Pattern[str] | None:
    """Convention pattern for `visibility`, or `None` where no convention exists."""
    name = "/" + re.escape(framework_name)
    if visibility is VisibilityClass.public:
        return re.compile(name + r"\.h$")
    if visibility is VisibilityClass.private:
        return re.compile(name + r"_?Private\.h$")
    return None


def find_candidate(
    headers: list[HeaderRecord], pattern: re.Pattern[str], visibility: VisibilityClass
) -> int | None:
    """Index of the first header of `visibility` whose path matches `pattern`."""
    for index, header in enumerate(headers):
        if header.visibility is visibility and pattern.search(header.path):
            return index
    return None


def promote(headers: list[HeaderRecord], index: int) -> int:
    """
    Mark `headers[index]` as umbrella and swap it with the first header that
    is not an umbrella, if that one comes earlier. Returns the new index.
    """
    headers[index].is_umbrella = True
    for front, header in enumerate(headers):
        if not header.is_umbrella:
            break
    else:
        return index
    if front < index:
        headers[front], headers[index] = headers[index], headers[front]
        return front
    return index


class UmbrellaResolver:
    def resolve(
        self,
        headers: list[HeaderRecord],
        explicit_paths: Mapping[VisibilityClass, str | None],
        framework_name: str | None = None,
    ) -> None:
        """
        Designate umbrella headers for every class in place.

        Raises `NoSuchUmbrellaHeaderError` for the first explicit path that
        matches nothing; classes after it are not processed.
        """
        for visibility in RESOLUTION_ORDER:
            self.resolve_class(headers, visibility, explicit_paths.get(visibility), framework_name)

    def resolve_class(
        self,
        headers: list[HeaderRecord],
        visibility: VisibilityClass,
        explicit_path: str | None,
        framework_name: str | None = None,
    ) -> int | None:
        """Designate the umbrella header for one class; returns its final index."""
        if explicit_path:
            index = find_candidate(headers, explicit_umbrella_pattern(explicit_path), visibility)
            if index is None:
                raise NoSuchUmbrellaHeaderError(explicit_path, visibility)
        elif framework_name:
            pattern = framework_umbrella_pattern(framework_name, visibility)
            if pattern is None:
                return None
            index = find_candidate(headers, pattern, visibility)
            if index is None:
                log.debug("no %s umbrella header for framework %s", visibility.value, framework_name)
                return None
        else:
            return None

        final = promote(headers, index)
        log.debug(
            "%s umbrella header %s at position %d", visibility.value, headers[final].path, final
        )
        return final
