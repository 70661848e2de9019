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

from typing import Optional


class ArtifactFSError(Exception):
    """Base exception for domain-specific errors."""


class FilesystemError(ArtifactFSError):
    """A mutating or committing filesystem operation could not complete."""

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.path = path

    @classmethod
    def from_os_error(cls, action: str, path: str, err: OSError) -> "FilesystemError":
        reason = err.strerror or str(err)
        return cls(f"{action} {path}: {reason}", path=path)


class DirectoryChangeError(FilesystemError):
    """The current working directory could not be changed."""


class ExecutableNotFoundError(FilesystemError):
    """No matching executable was found on the search path."""


class ConfigurationError(ArtifactFSError):
    """Bad option values (e.g. an unknown walk error policy)."""
