"""Core types for header set resolution."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class VisibilityClass(str, Enum):
    """Which consumers may reference a header."""

    public = "public"
    private = "private"
    project = "project"
    # Wildcard for directives only; never assigned to a header.
    unspecified = "unspecified"


@dataclass
class HeaderRecord:
    """
    A classified input header.

    `visibility` is fixed at creation. Excluded headers stay in the sequence
    with `is_excluded` set; consumers skip them.
    """

    path: str
    visibility: VisibilityClass
    include_name: str | None = None
    is_extra: bool = False
    is_excluded: bool = False
    is_umbrella: bool = False
    language: str | None = None

    def __post_init__(self) -> None:
        if self.visibility is VisibilityClass.unspecified:
            raise ValueError(f"header {self.path!r} needs a concrete visibility class")

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "visibility" and "visibility" in self.__dict__:
            raise AttributeError(f"visibility of {self.path!r} cannot be changed")
        super().__setattr__(name, value)


@dataclass(frozen=True)
class Directive:
    """A user-supplied path or glob pattern tagged with a visibility class."""

    pattern: str
    visibility: VisibilityClass = VisibilityClass.unspecified


@dataclass
class HeaderDirectives:
    """
    All directives for one resolution run.

    A class present as a key in `extra` replaces any default extra headers
    for that class, even when its list is empty.
    """

    extra: dict[VisibilityClass, list[str]]
    exclude: list[Directive]
    umbrella: dict[VisibilityClass, str]
    framework_name: str | None = None

    @classmethod
    def empty(cls) -> HeaderDirectives:
        return cls(extra={}, exclude=[], umbrella={})
