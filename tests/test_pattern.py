# Unit tests for rootglob.pattern.
# These tests validate glob parsing, path splitting and base directory extraction.

from __future__ import annotations

import os

import pytest

from rootglob.pattern import extract_basedir, parse_glob, split_path


def _p(s: str) -> str:
    return s.replace("/", os.sep)


def test_parse_glob_splits_on_separator() -> None:
    glob = parse_glob(_p("/home/mst/*.txt"))
    assert glob.parts == ("", "home", "mst", "*.txt")
    assert glob.recursive is False
    assert glob.wants_directory is False


def test_parse_glob_marks_recursive_only_for_whole_segment() -> None:
    assert parse_glob(_p("/home/**/pants")).recursive is True
    assert parse_glob(_p("/home/a**/pants")).recursive is False


def test_parse_glob_trailing_separator_wants_directory() -> None:
    glob = parse_glob(_p("/home/mst/*/"))
    assert glob.parts == ("", "home", "mst", "*")
    assert glob.wants_directory is True


def test_parse_glob_root_is_single_empty_segment() -> None:
    glob = parse_glob(os.sep)
    assert glob.parts == ("",)
    assert glob.wants_directory is False


def test_parse_glob_collapses_repeated_separators() -> None:
    assert parse_glob(_p("//home///mst//")).parts == ("", "home", "mst")


def test_parse_glob_leading_wildcard_starts_at_root() -> None:
    assert parse_glob(_p("*/**/pants")).parts == ("", "*", "**", "pants")
    assert parse_glob(_p("**/pants")).parts == ("", "**", "pants")


def test_split_path_strips_trailing_separator_except_root() -> None:
    assert split_path(_p("/home/mst/")) == ["", "home", "mst"]
    assert split_path(os.sep) == [""]
    assert split_path("") == [""]


@pytest.mark.parametrize(
    ("glob_s", "expected"),
    [
        ("/home/mst/**/*.txt", "/home/mst"),
        ("/home/mst/p*nts/x", "/home/mst"),
        ("/**/*.txt", ""),
        ("/*", ""),
        ("/home/mst", "/home"),
        ("/", ""),
    ],
)
def test_extract_basedir(glob_s: str, expected: str) -> None:
    assert extract_basedir(_p(glob_s)) == _p(expected)
