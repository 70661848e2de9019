# tests/unit/test_filter.py
import dataclasses

import pytest

from artifact_fs.domain.models import Filter, FilterMode, MatchKind


def test_default_filter_keeps_everything():
    f = Filter()
    assert f.mode is FilterMode.ALL
    assert f.keep("a.o")
    assert f.keep("")


def test_exclude_extension():
    f = Filter.exclude_extension(".o")
    assert not f.keep("a.o")
    assert f.keep("a.cpp")
    assert f.keep("a.o.d")


def test_include_extension():
    f = Filter.include_extension(".json")
    assert f.match_kind is MatchKind.EXTENSION
    assert f.keep("entry.json")
    assert not f.keep("entry.json.tmp")
    assert not f.keep(".json")


def test_substring_filters():
    assert Filter.include_substring("cache").keep("my_cache_file")
    assert not Filter.include_substring("cache").keep("other")
    assert not Filter.exclude_substring("tmp").keep("x.tmp")
    assert Filter.exclude_substring("tmp").keep("x.bin")


def test_filter_is_immutable():
    f = Filter.exclude_extension(".o")
    with pytest.raises(dataclasses.FrozenInstanceError):
        f.pattern = ".c"  # type: ignore[misc]


def test_filters_compare_by_value():
    assert Filter.exclude_extension(".o") == Filter(".o", FilterMode.EXCLUDE, MatchKind.EXTENSION)
