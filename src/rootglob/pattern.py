# Glob parsing for rootglob.
# Turns a glob string into a Glob and splits concrete paths the same way,
# so the matchers compare like with like.
#
# This module is pure string handling and must never touch the filesystem.

from __future__ import annotations

import os
from typing import List

from rootglob.models import Glob

RECURSIVE_WILDCARD = "**"


def _split_components(s: str) -> List[str]:
    # Split on the separator, collapsing repeated separators.
    # The leading empty segment stands for the root and is always kept;
    # a single trailing empty segment is kept so callers can see it.
    pieces = s.split(os.sep)
    components = [pieces[0]]
    last = len(pieces) - 1

    for i, piece in enumerate(pieces[1:], start=1):
        if piece:
            components.append(piece)
        elif i == last and components[-1]:
            components.append(piece)

    return components


def split_path(path_s: str) -> List[str]:
    # Split a concrete path into components.
    # A trailing separator is ignored unless the path is the root itself.
    components = _split_components(path_s)
    if len(components) > 1 and not components[-1]:
        components.pop()
    return components


def parse_glob(glob_s: str) -> Glob:
    """Parse a glob string into a Glob.

    ``*`` matches within one component, ``**`` spans zero or more whole
    components and a trailing separator restricts matches to directories.
    A glob starting with ``*`` still begins at the root.
    """
    parts = _split_components(glob_s)

    # Glob always gets a leading separator.
    if glob_s.startswith("*"):
        parts.insert(0, "")

    recursive = RECURSIVE_WILDCARD in parts

    wants_directory = False
    if len(parts) > 1 and not parts[-1]:
        parts.pop()
        wants_directory = True

    return Glob(
        parts=tuple(parts),
        wants_directory=wants_directory,
        recursive=recursive,
    )


def extract_basedir(glob_s: str) -> str:
    # The deepest literal directory the glob is anchored at.
    # The root comes back as the empty string.
    wildcard_pos = glob_s.find("*")
    if wildcard_pos == -1:
        wildcard_pos = len(glob_s)

    last_dir_pos = glob_s.rfind(os.sep, 0, wildcard_pos)
    if last_dir_pos == -1:
        return ""
    return glob_s[:last_dir_pos]
