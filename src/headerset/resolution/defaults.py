"""
Default patterns and ordering for header resolution.

Header patterns use gitignore syntax.
"""

from __future__ import annotations

from headerset.resolution.types import VisibilityClass

# File names picked up when a directive names a directory.
HEADER_PATTERNS: list[str] = ["*.h", "*.H", "*.hh", "*.hpp", "*.hxx"]

# Umbrella headers are searched, and promoted, in this order.
RESOLUTION_ORDER: tuple[VisibilityClass, ...] = (
    VisibilityClass.public,
    VisibilityClass.private,
    VisibilityClass.project,
)
