"""
headerset: resolve the header set of a library for interface generation.

Combines JSON header file lists with extra, excluded and umbrella header
directives into one ordered, classified header sequence.
"""

from headerset.resolution import (
    Directive,
    HeaderRecord,
    ResolutionContext,
    ResolutionResult,
    VisibilityClass,
)

__all__ = [
    "Directive",
    "HeaderRecord",
    "ResolutionContext",
    "ResolutionResult",
    "VisibilityClass",
]
