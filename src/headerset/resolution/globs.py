"""Glob directives over header paths, matched with wcmatch."""

from __future__ import annotations

from dataclasses import dataclass

from wcmatch import glob as wcglob

from headerset.resolution.types import HeaderRecord, VisibilityClass

# Characters that indicate a path is a glob pattern rather than a literal path.
_GLOB_CHARS = frozenset("*?[")

# `*` stays within one path component, `**` spans directories, and a pattern
# without `/` is matched against the file name. A leading `!` is literal.
_MATCH_FLAGS = wcglob.GLOBSTAR | wcglob.MATCHBASE | wcglob.DOTGLOB | wcglob.CASE


class NotAGlobError(ValueError):
    """Raised when a directive holds no glob characters and names a literal path."""


def is_glob(pattern: str) -> bool:
    return any(c in pattern for c in _GLOB_CHARS)


@dataclass
class PathGlob:
    """
    A compiled glob restricted to one visibility class (or to every class
    when `visibility` is `unspecified`). `matched` turns true on the first
    header it matches and stays true.

    The glob must match the header path itself; matching one of its parent
    directories is not enough.
    """

    pattern: str
    visibility: VisibilityClass
    matched: bool = False

    @classmethod
    def compile(cls, pattern: str, visibility: VisibilityClass) -> PathGlob:
        """Compile `pattern`, or raise `NotAGlobError` if it is a literal path."""
        if not is_glob(pattern):
            raise NotAGlobError(f"not a glob: {pattern!r}")
        return cls(pattern=pattern, visibility=visibility)

    def applies_to(self, visibility: VisibilityClass) -> bool:
        return self.visibility is VisibilityClass.unspecified or self.visibility is visibility

    def match(self, header: HeaderRecord) -> bool:
        if not self.applies_to(header.visibility):
            return False
        if not wcglob.globmatch(header.path, self.pattern, flags=_MATCH_FLAGS):
            return False
        self.matched = True
        return True
