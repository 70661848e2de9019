# tests/unit/test_paths.py
import os
import sys

import pytest

from artifact_fs.domain.paths import (
    append_path,
    canonicalize_path,
    change_extension,
    get_dir_part,
    get_extension,
    get_file_part,
)


def test_append_path_inserts_separator():
    assert append_path("a", "b") == "a" + os.sep + "b"


@pytest.mark.parametrize(
    "base, part, expected",
    [("", "b", "b"), ("a", "", "a"), ("", "", "")],
)
def test_append_path_with_empty_side_has_no_separator(base, part, expected):
    assert append_path(base, part) == expected


def test_append_path_does_not_double_trailing_separator():
    assert append_path("a" + os.sep, "b") == "a" + os.sep + "b"


@pytest.mark.parametrize(
    "path, expected",
    [
        ("foo.c", ".c"),
        (os.path.join("x", "foo.tar.gz"), ".gz"),
        ("foo", ""),
        (".bashrc", ""),
        (".config.bak", ".bak"),
        (os.path.join("dir.d", "file"), ""),
        ("trailing.", "."),
    ],
)
def test_get_extension(path, expected):
    assert get_extension(path) == expected


def test_change_extension_replaces_or_appends():
    assert change_extension("foo.c", ".o") == "foo.o"
    assert change_extension("foo", ".o") == "foo.o"
    assert change_extension(os.path.join("a.d", "foo"), ".o") == os.path.join("a.d", "foo.o")


@pytest.mark.parametrize("path", ["", "dir/", "a/b/", "a" + os.sep])
def test_change_extension_leaves_paths_without_file_name_alone(path):
    assert change_extension(path, ".a") == path


@pytest.mark.parametrize(
    "path", ["foo.c", "foo", ".hidden", os.path.join("d", "x.y.z"), "", "dir/", "a/b/"]
)
def test_change_extension_is_idempotent(path):
    once = change_extension(path, ".a")
    assert change_extension(once, ".a") == once


def test_get_file_part():
    p = os.path.join("a", "b", "c.txt")
    assert get_file_part(p) == "c.txt"
    assert get_file_part(p, include_ext=False) == "c"
    assert get_file_part("c.txt") == "c.txt"
    assert get_file_part(".bashrc", include_ext=False) == ".bashrc"


def test_get_dir_part():
    assert get_dir_part(os.path.join("a", "b", "c.txt")) == os.path.join("a", "b")
    assert get_dir_part("c.txt") == ""


@pytest.mark.skipif(sys.platform == "win32", reason="POSIX root")
def test_get_dir_part_keeps_root():
    assert get_dir_part("/foo") == "/"
    assert append_path(get_dir_part("/foo"), get_file_part("/foo")) == "/foo"


def test_canonicalize_resolves_dots_lexically():
    rel = os.path.join("a", ".", "b", "..", "c")
    assert canonicalize_path(rel) == os.path.join(os.getcwd(), "a", "c")


def test_canonicalize_does_not_require_existence(tmp_path):
    missing = os.path.join(str(tmp_path), "nope", "..", "still-nope")
    assert canonicalize_path(missing) == os.path.join(str(tmp_path), "still-nope")


@pytest.mark.parametrize(
    "path",
    ["", ".", "..", os.path.join("a", "..", "..", "b"), os.path.join("x", "y", "z.txt")],
)
def test_canonicalize_is_idempotent(path):
    once = canonicalize_path(path)
    assert canonicalize_path(once) == once


@pytest.mark.parametrize(
    "path", [os.path.join("x", "y", "z.txt"), os.path.join("x", "..", "w", "v")]
)
def test_split_and_join_round_trips_canonical_path(path):
    p = canonicalize_path(path)
    assert append_path(get_dir_part(p), get_file_part(p)) == canonicalize_path(p)
