# tests/integration/test_stage_and_commit.py
"""
End-to-end use of the primitives the way a cache layer would: stage output
under a temporary name, commit it into the cache, share it into a build
tree, then sweep the cache bottom-up.
"""
import os
from pathlib import Path

import artifact_fs as afs


def test_stage_commit_share_and_evict(tmp_path: Path):
    cache = tmp_path / "cache"
    entry_dir = os.path.join(str(cache), "ab", "cdef")
    afs.create_dir_with_parents(entry_dir)

    # Stage compiler output in the cache dir, then commit it.
    with afs.TmpFile(entry_dir, ".o") as staged:
        afs.write(b"\x7fELF object", staged.path)
        afs.link_or_copy(staged.path, afs.append_path(entry_dir, "main.o"))
    afs.write_atomic('{"files": ["main.o"]}', afs.append_path(entry_dir, ".entry"))
    afs.append("hit ab/cdef\n", os.path.join(str(cache), "stats.log"))

    # Share the artifact into a build tree.
    build = tmp_path / "build"
    build.mkdir()
    with afs.ScopedWorkDir(str(build)):
        afs.link_or_copy(afs.append_path(entry_dir, "main.o"), "main.o")
    assert (build / "main.o").read_bytes() == b"\x7fELF object"
    assert os.getcwd() != str(build)

    entries = afs.walk_directory(str(cache), afs.Filter.exclude_extension(".log"))
    names = [afs.get_file_part(e.path) for e in entries]
    assert names == [".entry", "main.o", "cdef", "ab"]
    assert entries[-1].size == len(b"\x7fELF object") + len('{"files": ["main.o"]}')

    # Post-order makes bottom-up eviction safe.
    for e in afs.walk_directory(str(cache)):
        if e.is_dir:
            os.rmdir(e.path)
        else:
            afs.remove_file(e.path)
    assert list(cache.iterdir()) == []

    # The build tree copy survives eviction of the cache entry.
    assert (build / "main.o").read_bytes() == b"\x7fELF object"
