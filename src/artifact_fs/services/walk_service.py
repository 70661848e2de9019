# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import logging
from enum import Enum
from typing import List, Optional, Tuple, Union

from ..adapters.local_fs import LocalFS
from ..domain.errors import ConfigurationError, FilesystemError
from ..domain.models import FileMetadata, Filter
from ..domain.paths import append_path
from ..ports.filesystem import FilesystemPort

logger = logging.getLogger(__name__)

# (size, latest modify time, latest access time); times are None when no
# entry contributed.
_Totals = Tuple[int, Optional[int], Optional[int]]


class WalkErrorPolicy(Enum):
    SKIP = "skip"
    RAISE = "raise"

    @classmethod
    def parse(cls, value: Union[str, "WalkErrorPolicy"]) -> "WalkErrorPolicy":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            valid = ", ".join(p.value for p in cls)
            raise ConfigurationError(
                f"Unknown walk error policy: {value!r}. Valid options: {valid}"
            ) from None


def _latest(a: Optional[int], b: int) -> int:
    return b if a is None else max(a, b)


class DirectoryWalker:
    """
    Recursively lists a directory tree as FileMetadata snapshots.

    Ordering:
      * every entry inside a directory comes before the directory itself
        (post-order)
      * siblings are visited in name order

    Errors:
      * WalkErrorPolicy.SKIP (default): unreadable subtrees and entries that
        cannot be stat'ed are logged and left out of the result
      * WalkErrorPolicy.RAISE: the first failure raises FilesystemError
    """

    def __init__(
        self,
        fs: FilesystemPort,
        *,
        on_error: Union[str, WalkErrorPolicy] = WalkErrorPolicy.SKIP,
    ) -> None:
        self._fs = fs
        self._on_error = WalkErrorPolicy.parse(on_error)

    @property
    def on_error(self) -> WalkErrorPolicy:
        return self._on_error

    def walk(self, root: str, file_filter: Optional[Filter] = None) -> List[FileMetadata]:
        """
        Walk everything below `root` (the root itself is not included).

        `file_filter` is applied to file names only; directories are always
        descended into and always reported.
        """
        file_filter = file_filter or Filter()
        result: List[FileMetadata] = []
        self._visit_contents(str(root), file_filter, result)
        return result

    def info(self, path: str) -> FileMetadata:
        """
        Metadata for a single entry. Directories get the same aggregated
        size and times that `walk` reports for them.

        Raises FilesystemError if `path` itself cannot be queried.
        """
        path = str(path)
        try:
            own = self._fs.stat(path)
        except OSError as e:
            raise FilesystemError.from_os_error("Unable to get file info for", path, e) from e
        if not own.is_dir:
            return own
        totals = self._visit_contents(path, Filter(), [])
        return self._dir_metadata(own, totals or (0, None, None))

    def _fail(self, action: str, path: str, err: OSError) -> None:
        if self._on_error is WalkErrorPolicy.RAISE:
            raise FilesystemError.from_os_error(action, path, err) from err
        logger.warning("DirectoryWalker: skipping %s: %s", path, err)

    @staticmethod
    def _dir_metadata(own: FileMetadata, totals: _Totals) -> FileMetadata:
        size, mtime, atime = totals
        return FileMetadata(
            path=own.path,
            modify_time=own.modify_time if mtime is None else mtime,
            access_time=own.access_time if atime is None else atime,
            size=size,
            identity=own.identity,
            is_dir=True,
        )

    def _visit_contents(
        self, dir_path: str, file_filter: Filter, out: List[FileMetadata]
    ) -> Optional[_Totals]:
        """Append the entries below `dir_path` to `out`; None if it is unreadable."""
        try:
            entries = list(self._fs.list_dir(dir_path))
        except OSError as e:
            self._fail("Unable to list directory", dir_path, e)
            return None

        size = 0
        mtime: Optional[int] = None
        atime: Optional[int] = None
        for name, is_dir in entries:
            child = append_path(dir_path, name)
            if is_dir:
                info = self._visit_dir(child, file_filter, out)
            else:
                if not file_filter.keep(name):
                    continue
                try:
                    info = self._fs.stat(child)
                except OSError as e:
                    self._fail("Unable to stat", child, e)
                    continue
                out.append(info)

            if info is None:
                continue
            size += info.size
            mtime = _latest(mtime, info.modify_time)
            atime = _latest(atime, info.access_time)
        return size, mtime, atime

    def _visit_dir(
        self, dir_path: str, file_filter: Filter, out: List[FileMetadata]
    ) -> Optional[FileMetadata]:
        try:
            own = self._fs.stat(dir_path)
        except OSError as e:
            self._fail("Unable to stat", dir_path, e)
            return None

        totals = self._visit_contents(dir_path, file_filter, out)
        if totals is None:
            return None
        info = self._dir_metadata(own, totals)
        out.append(info)
        return info


def walk_directory(
    path: str,
    file_filter: Optional[Filter] = None,
    on_error: Union[str, WalkErrorPolicy] = WalkErrorPolicy.SKIP,
) -> List[FileMetadata]:
    """Walk `path` on the local filesystem. See DirectoryWalker.walk."""
    return DirectoryWalker(LocalFS(), on_error=on_error).walk(path, file_filter)


def get_file_info(path: str) -> FileMetadata:
    """Metadata for one local entry. See DirectoryWalker.info."""
    return DirectoryWalker(LocalFS()).info(path)
