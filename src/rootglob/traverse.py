# Lazy filesystem traversal for rootglob.
# GlobMatches drives the matchers over a real directory tree, one pull at
# a time, keeping a stack of directories to visit and a stack of results
# ready to hand out.
#
# Filesystem errors below the starting directory are logged and skipped.
# They never end the enumeration.

from __future__ import annotations

import logging
import os
import stat
from typing import Iterator, List, Optional

from rootglob.errors import AbsolutePathRequired
from rootglob.matching import match_path
from rootglob.models import Glob, MatchType
from rootglob.pattern import extract_basedir, parse_glob

logger = logging.getLogger(__name__)


def _display_path(path_s: str) -> str:
    # The root is kept as "" internally so joins stay uniform.
    return path_s or os.sep


class GlobMatches:
    """Iterator over every path matching an absolute glob.

    Work happens only inside next(). Directory handles are opened and closed
    within a single call, so abandoning iteration is safe as long as
    dispose() is called (or the object is used as a context manager).
    Calling next() after dispose() is undefined.
    """

    def __init__(self, glob_s: str):
        self.glob: Glob = parse_glob(glob_s)
        self.buffered_matches: List[str] = []
        self.dir_queue: List[str] = [extract_basedir(glob_s)]

    def next(self) -> Optional[str]:
        # Return the next match, or None once the tree is exhausted.
        while True:
            if self.buffered_matches:
                return self.buffered_matches.pop()

            # Out of results and out of places to search.
            if not self.dir_queue:
                return None

            dir_path = self.dir_queue.pop()
            match = match_path(self.glob, dir_path)

            if match is MatchType.mismatch:
                continue

            if match is MatchType.match:
                # The starting directory comes from the glob text, not a listing.
                if not self.glob.wants_directory or self._is_directory(_display_path(dir_path)):
                    self.buffered_matches.append(_display_path(dir_path))

                # Only a recursive glob can match further down the tree.
                if not self.glob.recursive:
                    continue

            self._expand(dir_path)

    def dispose(self) -> None:
        # Drop every queued directory and buffered result in one go.
        self.buffered_matches.clear()
        self.dir_queue.clear()

    def _expand(self, dir_path: str) -> None:
        # List one directory and sort its entries into the queue or buffer.
        try:
            with os.scandir(_display_path(dir_path)) as it:
                names = [entry.name for entry in it]
        except OSError as exc:
            logger.debug("Skipped unreadable directory %s: %s", _display_path(dir_path), exc)
            return

        for name in names:
            if name in (".", ".."):
                continue

            path_s = dir_path + os.sep + name

            if self._is_directory(path_s):
                # Always queued: a mismatch here says nothing about what lies below.
                self.dir_queue.append(path_s)
                continue

            if self.glob.wants_directory:
                continue

            if match_path(self.glob, path_s) is MatchType.match:
                self.buffered_matches.append(path_s)

    def _is_directory(self, path_s: str) -> bool:
        # Symlinks are classified by what they point at.
        try:
            st = os.lstat(path_s)
        except OSError as exc:
            logger.debug("Could not stat path: %s: %s", path_s, exc)
            return False

        if not stat.S_ISLNK(st.st_mode):
            return stat.S_ISDIR(st.st_mode)

        try:
            realpath = os.path.realpath(path_s, strict=True)
        except OSError as exc:
            logger.debug("Failure calling realpath on: %s: %s", path_s, exc)
            return False

        try:
            return stat.S_ISDIR(os.stat(realpath).st_mode)
        except OSError as exc:
            logger.debug("Failure opening symlink target: %s (symlink: %s): %s", realpath, path_s, exc)
            return False

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        result = self.next()
        if result is None:
            raise StopIteration
        return result

    def __enter__(self) -> GlobMatches:
        return self

    def __exit__(self, *exc_info) -> None:
        self.dispose()


def list_files(glob_s: str) -> GlobMatches:
    """Start a lazy enumeration of every path matching ``glob_s``.

    The glob must be absolute. Raises AbsolutePathRequired otherwise.
    """
    if not glob_s.startswith(os.sep):
        raise AbsolutePathRequired(glob_s)

    return GlobMatches(glob_s)
