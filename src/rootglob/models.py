# Shared data models for rootglob.
# Lives in its own module so the parser, matchers, traversal and cli
# can all import these types without importing each other.

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Tuple


class MatchType(str, Enum):
    # Nothing below this path can ever match.
    mismatch = "mismatch"

    # The glob was not fully consumed, but nothing in the input contradicted it.
    partial_match = "partial-match"

    # Glob and input were both fully consumed.
    match = "match"


@dataclass(frozen=True)
class Glob:
    parts: Tuple[str, ...]
    wants_directory: bool
    recursive: bool


class MatchPosition(NamedTuple):
    # One still-viable alignment of glob position to input position.
    glob_idx: int
    input_idx: int


@dataclass(frozen=True)
class Options:
    dirs_only: bool
    sort: bool
    count: bool
    null_separated: bool
    verbose: bool
