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
Basic filesystem queries and mutations.

Queries (`file_exists`, `dir_exists`, `resolve_path`, `get_user_home_dir`)
never raise for an expected negative outcome. Mutating operations raise
FilesystemError carrying the OS diagnostic, unless `ignore_errors` is given
where supported.
"""

import logging
import os
import shutil
import sys
import tempfile
import uuid
from typing import Union

from .domain.errors import DirectoryChangeError, FilesystemError

logger = logging.getLogger(__name__)

IS_WINDOWS = sys.platform == "win32"

Data = Union[str, bytes]


def to_bytes(data: Data) -> bytes:
    return data.encode("utf-8") if isinstance(data, str) else bytes(data)


def get_unique_id() -> str:
    return uuid.uuid4().hex


def get_temp_dir() -> str:
    if IS_WINDOWS:
        for var in ("TEMP", "TMP"):
            value = os.environ.get(var)
            if value:
                return value
        return tempfile.gettempdir()
    return os.environ.get("TMPDIR") or "/tmp"


def get_user_home_dir() -> str:
    """The user home directory, or "" if it cannot be determined."""
    if IS_WINDOWS:
        profile = os.environ.get("USERPROFILE")
        if profile:
            return profile
        drive = os.environ.get("HOMEDRIVE", "")
        home_path = os.environ.get("HOMEPATH", "")
        return drive + home_path if home_path else ""

    home = os.environ.get("HOME")
    if home:
        return home
    import pwd

    try:
        return pwd.getpwuid(os.getuid()).pw_dir
    except KeyError:
        return ""


def get_cwd() -> str:
    try:
        return os.getcwd()
    except OSError as e:
        raise FilesystemError(
            f"Unable to get the current working directory: {e.strerror or e}"
        ) from e


def set_cwd(path: str) -> None:
    try:
        os.chdir(path)
    except OSError as e:
        raise DirectoryChangeError.from_os_error(
            "Unable to change the current working directory to", path, e
        ) from e


def resolve_path(path: str) -> str:
    """
    Absolute path to `path` with all symbolic links resolved.

    Returns "" if the path does not exist or cannot be resolved.
    """
    if not path:
        return ""
    try:
        resolved = os.path.realpath(path)
    except (OSError, ValueError):
        return ""
    return resolved if os.path.exists(resolved) else ""


def file_exists(path: str) -> bool:
    return os.path.isfile(path)


def dir_exists(path: str) -> bool:
    return os.path.isdir(path)


def create_dir(path: str) -> None:
    try:
        os.mkdir(path)
    except OSError as e:
        raise FilesystemError.from_os_error("Unable to create directory", path, e) from e


def create_dir_with_parents(path: str) -> None:
    """Create `path` and any missing parents; an existing directory is fine."""
    try:
        os.makedirs(path, exist_ok=True)
    except OSError as e:
        raise FilesystemError.from_os_error("Unable to create directory", path, e) from e


def remove_file(path: str, ignore_errors: bool = False) -> None:
    try:
        os.remove(path)
    except OSError as e:
        if ignore_errors:
            logger.debug("Ignoring failure to remove file %s: %s", path, e)
            return
        raise FilesystemError.from_os_error("Unable to remove file", path, e) from e


def remove_dir(path: str, ignore_errors: bool = False) -> None:
    """Remove a directory and everything in it."""
    try:
        shutil.rmtree(path)
    except OSError as e:
        if ignore_errors:
            logger.debug("Ignoring failure to remove directory %s: %s", path, e)
            return
        raise FilesystemError.from_os_error("Unable to remove directory", path, e) from e


def touch(path: str) -> None:
    """Set the modification and access times of an existing file to now."""
    try:
        os.utime(path, None)
    except OSError as e:
        raise FilesystemError.from_os_error("Unable to touch", path, e) from e


def read(path: str) -> bytes:
    try:
        with open(path, "rb") as fh:
            return fh.read()
    except OSError as e:
        raise FilesystemError.from_os_error("Unable to read", path, e) from e


def write_file(data: Data, path: str, *, sync: bool = False) -> None:
    payload = to_bytes(data)
    try:
        with open(path, "wb") as fh:
            fh.write(payload)
            if sync:
                fh.flush()
                os.fsync(fh.fileno())
    except OSError as e:
        raise FilesystemError.from_os_error("Unable to write", path, e) from e


def write(data: Data, path: str) -> None:
    """Write `data` (str is UTF-8 encoded) to `path`, replacing its content."""
    write_file(data, path)


def human_readable_size(byte_size: int) -> str:
    """Format a byte count, e.g. "123 bytes" or "4.7 MiB"."""
    if byte_size < 1024:
        return f"{byte_size} bytes"
    size = float(byte_size)
    units = ("KiB", "MiB", "GiB", "TiB")
    for unit in units:
        size /= 1024.0
        if size < 1024.0 or unit == units[-1]:
            break
    return f"{size:.1f} {unit}"
