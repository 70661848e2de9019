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

from dataclasses import dataclass
from enum import Enum

from .paths import get_extension


@dataclass(frozen=True)
class FileMetadata:
    """
    Snapshot of a single filesystem entry.

    Times are whole seconds since the Unix epoch. For a directory, `size`
    is the total size of the recursively contained files and the times are
    the most recent times among them (the directory's own times if it is
    empty). `identity` is the inode number, or 0 where the filesystem has no
    stable file id.
    """
    path: str
    modify_time: int
    access_time: int
    size: int
    identity: int = 0
    is_dir: bool = False


class FilterMode(Enum):
    ALL = "all"
    INCLUDE = "include"
    EXCLUDE = "exclude"


class MatchKind(Enum):
    SUBSTRING = "substring"
    EXTENSION = "extension"


@dataclass(frozen=True)
class Filter:
    """
    File name filter for directory traversal.

    The default instance keeps everything. Only file names are tested;
    directories are always traversed.
    """
    pattern: str = ""
    mode: FilterMode = FilterMode.ALL
    match_kind: MatchKind = MatchKind.SUBSTRING

    @classmethod
    def include_substring(cls, pattern: str) -> "Filter":
        return cls(pattern, FilterMode.INCLUDE, MatchKind.SUBSTRING)

    @classmethod
    def include_extension(cls, pattern: str) -> "Filter":
        return cls(pattern, FilterMode.INCLUDE, MatchKind.EXTENSION)

    @classmethod
    def exclude_substring(cls, pattern: str) -> "Filter":
        return cls(pattern, FilterMode.EXCLUDE, MatchKind.SUBSTRING)

    @classmethod
    def exclude_extension(cls, pattern: str) -> "Filter":
        return cls(pattern, FilterMode.EXCLUDE, MatchKind.EXTENSION)

    def _matches(self, file_name: str) -> bool:
        if self.match_kind is MatchKind.EXTENSION:
            return get_extension(file_name) == self.pattern
        return self.pattern in file_name

    def keep(self, file_name: str) -> bool:
        """Return True if a file with this name should be kept."""
        if self.mode is FilterMode.ALL:
            return True
        matched = self._matches(file_name)
        return matched if self.mode is FilterMode.INCLUDE else not matched


@dataclass(frozen=True)
class ExecutablePath:
    """
    Location of an executable.

    `real_path` has all symbolic links resolved, `virtual_path` is the file
    that was found during the search (possibly a link to `real_path`) and
    `invoked_as` is the command text the caller asked for.
    """
    real_path: str
    virtual_path: str
    invoked_as: str
