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

import os
import stat as stat_mod
from typing import Iterator, Tuple

from ..domain.models import FileMetadata
from ..ports.filesystem import FilesystemPort


class LocalFS(FilesystemPort):
    """Local filesystem adapter."""

    def list_dir(self, path: str) -> Iterator[Tuple[str, bool]]:
        # Materialise the listing so the directory handle is closed before
        # the caller descends.
        with os.scandir(path) as it:
            entries = [(e.name, e.is_dir(follow_symlinks=False)) for e in it]
        for entry in sorted(entries):
            yield entry

    def stat(self, path: str) -> FileMetadata:
        st = os.lstat(path)
        is_dir = stat_mod.S_ISDIR(st.st_mode)
        return FileMetadata(
            path=path,
            modify_time=int(st.st_mtime),
            access_time=int(st.st_atime),
            size=0 if is_dir else st.st_size,
            # NOTE: st_ino is 0 on filesystems without a stable file id.
            identity=getattr(st, "st_ino", 0) or 0,
            is_dir=is_dir,
        )
