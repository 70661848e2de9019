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

"""
Operations that commit data to a location other processes may be reading.

Everything that lands at a destination path is staged under a temporary
name in the destination directory and renamed into place, so an existing
file at the destination is replaced, never modified. Files that share an
inode through `link_or_copy` therefore stay identical.
"""

import errno
import logging
import os
import shutil

from .domain.errors import FilesystemError
from .domain.paths import get_dir_part
from .operations import Data, remove_file, to_bytes, write_file
from .scoped import TmpFile

logger = logging.getLogger(__name__)

_O_BINARY = getattr(os, "O_BINARY", 0)


def _replace(tmp_path: str, to_path: str) -> None:
    try:
        os.replace(tmp_path, to_path)
    except OSError as e:
        raise FilesystemError.from_os_error(
            f"Unable to move {tmp_path} to", to_path, e
        ) from e


def write_atomic(data: Data, path: str) -> None:
    """
    Replace the content of `path` as a single step.

    Readers see either the old or the new content in full. The data is
    written and synced to a temporary file next to `path`, then renamed.
    """
    with TmpFile(get_dir_part(path), ".tmp") as tmp:
        write_file(data, tmp.path, sync=True)
        _replace(tmp.path, path)


def append(data: Data, path: str) -> None:
    """
    Append `data` to `path`, creating it if needed.

    Uses an O_APPEND descriptor and a single write, so concurrent appenders
    in other processes do not interleave within one call.
    """
    payload = memoryview(to_bytes(data))
    try:
        fd = os.open(path, os.O_WRONLY | os.O_APPEND | os.O_CREAT | _O_BINARY, 0o666)
    except OSError as e:
        raise FilesystemError.from_os_error("Unable to open for appending", path, e) from e
    try:
        while payload:
            written = os.write(fd, payload)
            payload = payload[written:]
    except OSError as e:
        raise FilesystemError.from_os_error("Unable to append to", path, e) from e
    finally:
        os.close(fd)


def copy(from_path: str, to_path: str) -> None:
    """Full copy of the bytes (and permission bits) of `from_path`."""
    with TmpFile(get_dir_part(to_path), ".tmp") as tmp:
        try:
            shutil.copyfile(from_path, tmp.path)
            shutil.copymode(from_path, tmp.path)
        except OSError as e:
            raise FilesystemError.from_os_error(
                f"Unable to copy {from_path} to", to_path, e
            ) from e
        _replace(tmp.path, to_path)


def move(from_path: str, to_path: str) -> None:
    """Rename `from_path` to `to_path`, copying across filesystems if needed."""
    try:
        os.replace(from_path, to_path)
        return
    except OSError as e:
        if e.errno != errno.EXDEV:
            raise FilesystemError.from_os_error(
                f"Unable to move {from_path} to", to_path, e
            ) from e
        logger.debug("Cross-device move of %s to %s; copying", from_path, to_path)
    copy(from_path, to_path)
    remove_file(from_path)


def link_or_copy(from_path: str, to_path: str) -> None:
    """
    Hard link `from_path` to `to_path`, or copy it if linking is not possible.

    After a hard link both paths share storage: treat `to_path` as read-only.
    """
    with TmpFile(get_dir_part(to_path), ".tmp") as tmp:
        try:
            os.link(from_path, tmp.path)
        except OSError as e:
            logger.debug("Hard link %s -> %s failed (%s); copying", from_path, to_path, e)
        else:
            _replace(tmp.path, to_path)
            return
    copy(from_path, to_path)
