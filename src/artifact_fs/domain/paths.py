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
String-level path manipulation.

Nothing in this module touches the filesystem, with the single exception of
`canonicalize_path`, which reads the current working directory to anchor
relative paths.
"""

import os

_SEPARATORS = (os.sep,) if os.altsep is None else (os.sep, os.altsep)


def _last_separator(path: str) -> int:
    return max(path.rfind(sep) for sep in _SEPARATORS)


def append_path(path: str, append: str) -> str:
    """
    Join two path parts with the platform separator.

    No separator is inserted when either side is empty, or when `path`
    already ends with one.
    """
    if not path:
        return append
    if not append:
        return path
    if path.endswith(_SEPARATORS):
        return path + append
    return path + os.sep + append


def canonicalize_path(path: str) -> str:
    """Absolute form of `path` with "." and ".." resolved lexically."""
    return os.path.abspath(path)


def get_extension(path: str) -> str:
    """Extension of the final path segment including the leading period, or ""."""
    name = path[_last_separator(path) + 1 :]
    pos = name.rfind(".")
    # A leading period marks a hidden file, not an extension.
    if pos <= 0:
        return ""
    return name[pos:]


def change_extension(path: str, new_ext: str) -> str:
    """
    Replace the extension of `path`, or append `new_ext` if it has none.

    A path without a file name (empty, or ending in a separator) is
    returned unchanged.
    """
    if not get_file_part(path):
        return path
    ext = get_extension(path)
    return path[: len(path) - len(ext)] + new_ext


def get_file_part(path: str, include_ext: bool = True) -> str:
    """
    The part of `path` after the final separator (the whole input if there
    is none), optionally without its extension.
    """
    name = path[_last_separator(path) + 1 :]
    if not include_ext:
        ext = get_extension(name)
        if ext:
            name = name[: -len(ext)]
    return name


def get_dir_part(path: str) -> str:
    """
    The part of `path` before the final separator, or "" if there is none.

    A separator at position zero is the filesystem root and is kept, so
    that ``get_dir_part("/foo") == "/"``.
    """
    pos = _last_separator(path)
    if pos < 0:
        return ""
    if pos == 0:
        return path[:1]
    return path[:pos]
