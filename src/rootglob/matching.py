# Backtracking matchers for rootglob.
# path_component_match compares one glob segment with one path component;
# match_path compares a whole Glob with a whole path.
#
# Both keep an explicit stack of candidates instead of recursing, and both
# explore the most recently pushed candidate first.

from __future__ import annotations

from typing import List, Sequence

from rootglob.errors import ParseError
from rootglob.models import Glob, MatchPosition, MatchType
from rootglob.pattern import RECURSIVE_WILDCARD, split_path


def path_component_match(glob: str, s: str) -> bool:
    """Return True if the single component ``s`` matches the segment ``glob``.

    Raises ParseError when the segment contains two adjacent ``*``.
    """
    if glob == s:
        return True

    candidates: List[MatchPosition] = [MatchPosition(glob_idx=0, input_idx=0)]

    while candidates:
        glob_idx, input_idx = candidates.pop()

        if glob_idx == len(glob) or input_idx == len(s):
            # Out of glob or out of input. Either is no match.
            continue

        if glob[glob_idx] == "*":
            if glob_idx + 1 == len(glob):
                # A trailing '*' eats the rest of the input.
                return True

            next_required_char = glob[glob_idx + 1]
            if next_required_char == "*":
                raise ParseError(glob)

            for start_idx in range(input_idx, len(s)):
                if s[start_idx] == next_required_char:
                    candidates.append(MatchPosition(glob_idx + 1, start_idx))
        elif glob[glob_idx] != s[input_idx]:
            continue
        elif glob_idx + 1 == len(glob):
            if input_idx + 1 == len(s):
                return True
        else:
            candidates.append(MatchPosition(glob_idx + 1, input_idx + 1))

    return False


def match_loop(glob: Glob, path: Sequence[str]) -> MatchType:
    # Walk the glob against already split path components.
    candidates: List[MatchPosition] = [MatchPosition(glob_idx=0, input_idx=0)]
    found_partial_match = False

    while candidates:
        glob_idx, path_idx = candidates.pop()

        while True:
            if glob_idx == len(glob.parts):
                if path_idx == len(path):
                    return MatchType.match
                break

            if path_idx == len(path):
                # Ran out of input before we ran out of glob.
                found_partial_match = True
                break

            part = glob.parts[glob_idx]

            if part == "*":
                glob_idx += 1
                path_idx += 1
            elif part == RECURSIVE_WILDCARD:
                found_partial_match = True

                if glob_idx + 1 == len(glob.parts):
                    return MatchType.match

                # One candidate per number of components '**' swallows.
                candidates.extend(
                    MatchPosition(glob_idx + 1, test_idx)
                    for test_idx in range(path_idx, len(path))
                )
                break
            elif path_component_match(part, path[path_idx]):
                glob_idx += 1
                path_idx += 1
            else:
                break

    if found_partial_match:
        return MatchType.partial_match
    return MatchType.mismatch


def match_path(glob: Glob, path_s: str) -> MatchType:
    """Match a concrete path string against a parsed glob.

    ``partial_match`` means the path is a viable prefix: it did not match,
    but something below it still might.
    """
    return match_loop(glob, split_path(path_s))
