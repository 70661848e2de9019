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
import os

from .domain.paths import append_path
from .operations import get_cwd, get_unique_id, remove_dir, remove_file, set_cwd

logger = logging.getLogger(__name__)


class TmpFile:
    """
    Reserves a unique temporary path and removes whatever ends up there.

    Only a name is reserved; nothing is created on disk. On `close()` (or
    when leaving a `with` block) a file or directory found at the path is
    removed, recursively for directories. Cleanup never raises.

        with TmpFile(cache_dir, ".tmp") as tmp:
            write(data, tmp.path)
            ...
    """

    def __init__(self, directory: str, extension: str) -> None:
        while True:
            path = append_path(directory, get_unique_id() + extension)
            if not os.path.lexists(path):
                break
        self._path = path
        self._closed = False

    @property
    def path(self) -> str:
        return self._path

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        try:
            if os.path.isdir(self._path) and not os.path.islink(self._path):
                remove_dir(self._path, ignore_errors=True)
            elif os.path.lexists(self._path):
                remove_file(self._path, ignore_errors=True)
        except Exception as e:
            logger.warning("TmpFile: cleanup of %s failed: %s", self._path, e)

    def __enter__(self) -> "TmpFile":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"TmpFile({self._path!r})"


class ScopedWorkDir:
    """
    Temporarily changes the process-wide current working directory.

    The directory is changed on construction (DirectoryChangeError if that
    fails) and restored on `close()` / leaving a `with` block. An empty
    `new_work_dir` makes both steps no-ops. Nested guards must be closed in
    reverse order of creation; `with` blocks do that naturally. Restoring
    never raises.
    """

    def __init__(self, new_work_dir: str) -> None:
        self._old_work_dir = ""
        if new_work_dir:
            old_work_dir = get_cwd()
            set_cwd(new_work_dir)
            self._old_work_dir = old_work_dir

    def close(self) -> None:
        if not self._old_work_dir:
            return
        old_work_dir, self._old_work_dir = self._old_work_dir, ""
        try:
            set_cwd(old_work_dir)
        except Exception as e:
            logger.warning("ScopedWorkDir: unable to restore %s: %s", old_work_dir, e)

    def __enter__(self) -> "ScopedWorkDir":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
