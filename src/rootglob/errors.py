# Error types raised by rootglob.
# Soft filesystem failures are never raised; see traverse.py.

from __future__ import annotations


class GlobError(Exception):
    """Base class for every error rootglob raises on purpose."""


class AbsolutePathRequired(GlobError, ValueError):
    """The glob does not start with a path separator."""

    def __init__(self, glob_s: str):
        super().__init__(f"glob must be an absolute path: {glob_s!r}")
        self.glob = glob_s


class ParseError(GlobError, ValueError):
    """A glob segment holds two adjacent '*' wildcards."""

    def __init__(self, segment: str):
        super().__init__(f"adjacent '*' wildcards are not supported in {segment!r}")
        self.segment = segment
