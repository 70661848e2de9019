# tests/unit/test_scoped_work_dir.py
import os
from pathlib import Path

import pytest

import artifact_fs.scoped as scoped
from artifact_fs.domain.errors import DirectoryChangeError, FilesystemError
from artifact_fs.scoped import ScopedWorkDir


def _cwd_is(path: Path) -> bool:
    return os.path.samefile(os.getcwd(), str(path))


def test_changes_and_restores_cwd(tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = tmp_path / "work"
    target.mkdir()

    with ScopedWorkDir(str(target)):
        assert _cwd_is(target)
    assert _cwd_is(tmp_path)


def test_empty_dir_is_a_noop(tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with ScopedWorkDir(""):
        assert _cwd_is(tmp_path)
    assert _cwd_is(tmp_path)


def test_missing_dir_fails_on_construction(tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(DirectoryChangeError) as excinfo:
        ScopedWorkDir(str(tmp_path / "does-not-exist"))
    assert isinstance(excinfo.value, FilesystemError)
    assert "does-not-exist" in str(excinfo.value)
    assert _cwd_is(tmp_path)


def test_restores_when_body_raises(tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = tmp_path / "work"
    target.mkdir()
    with pytest.raises(RuntimeError):
        with ScopedWorkDir(str(target)):
            raise RuntimeError("boom")
    assert _cwd_is(tmp_path)


def test_nested_guards_restore_in_reverse_order(tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    a = tmp_path / "a"
    b = a / "b"
    b.mkdir(parents=True)

    with ScopedWorkDir(str(a)):
        with ScopedWorkDir(str(b)):
            assert _cwd_is(b)
        assert _cwd_is(a)
    assert _cwd_is(tmp_path)


def test_explicit_close_is_idempotent(tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = tmp_path / "work"
    target.mkdir()
    guard = ScopedWorkDir(str(target))
    guard.close()
    assert _cwd_is(tmp_path)
    os.chdir(str(target))
    guard.close()
    assert _cwd_is(target)


def test_restore_failure_never_propagates(tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = tmp_path / "work"
    target.mkdir()
    guard = ScopedWorkDir(str(target))

    def failing_set_cwd(path):
        raise DirectoryChangeError("cannot restore", path=path)

    monkeypatch.setattr(scoped, "set_cwd", failing_set_cwd)
    guard.close()
