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

from abc import ABC, abstractmethod
from typing import Iterator, Tuple

from ..domain.models import FileMetadata


class FilesystemPort(ABC):
    """Abstract interface for the filesystem queries used by directory traversal."""

    @abstractmethod
    def list_dir(self, path: str) -> Iterator[Tuple[str, bool]]:
        """Yield (name, is_dir) for each entry directly inside `path`.

        Symbolic links to directories must be reported with is_dir=False.
        Raises OSError if the directory cannot be read.
        """
        raise NotImplementedError

    @abstractmethod
    def stat(self, path: str) -> FileMetadata:
        """Return metadata for the entry itself (links are not followed).

        Raises OSError if the entry cannot be queried.
        """
        raise NotImplementedError
