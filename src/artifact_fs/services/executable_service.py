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
import sys
from typing import Iterator, List, Mapping, Optional

from ..domain.errors import ExecutableNotFoundError
from ..domain.models import ExecutablePath
from ..domain.paths import append_path, get_dir_part, get_extension, get_file_part
from ..operations import resolve_path

logger = logging.getLogger(__name__)

IS_WINDOWS = sys.platform == "win32"
DEFAULT_PATHEXT = ".COM;.EXE;.BAT;.CMD"


class ExecutableResolver:
    """
    Resolves a command name to the executable file that would run.

    A command containing a directory part is checked as given; a bare name
    is searched for in each PATH directory in order. On Windows the PATHEXT
    extensions are probed when the command has none of its own.
    """

    def __init__(self, environ: Optional[Mapping[str, str]] = None) -> None:
        self._environ = os.environ if environ is None else environ

    def _search_dirs(self) -> List[str]:
        path_env = self._environ.get("PATH", "")
        return [d for d in path_env.split(os.pathsep) if d]

    def _extensions(self, program: str) -> List[str]:
        if not IS_WINDOWS:
            return [""]
        pathext = self._environ.get("PATHEXT", DEFAULT_PATHEXT)
        exts = [e.lower() for e in pathext.split(";") if e]
        if get_extension(program).lower() in exts:
            return [""]
        return exts

    def _candidates(self, program: str) -> Iterator[str]:
        exts = self._extensions(program)
        if get_dir_part(program):
            for ext in exts:
                yield program + ext
            return
        for directory in self._search_dirs():
            for ext in exts:
                yield append_path(directory, program + ext)

    @staticmethod
    def _is_executable(path: str) -> bool:
        return os.path.isfile(path) and os.access(path, os.X_OK)

    @staticmethod
    def _same_name(a: str, b: str) -> bool:
        if IS_WINDOWS:
            return a.lower() == b.lower()
        return a == b

    def find(self, program: str, exclude: str = "") -> ExecutablePath:
        """
        Find `program` and resolve it to its real location.

        Candidates whose resolved file name (without extension) equals
        `exclude` are passed over, so that a wrapper reached through a link
        named after the tool it wraps does not find itself.

        Raises ExecutableNotFoundError if there is no match.
        """
        for candidate in self._candidates(program):
            if not self._is_executable(candidate):
                continue
            real_path = resolve_path(candidate)
            if not real_path:
                continue
            if exclude and self._same_name(get_file_part(real_path, False), exclude):
                logger.debug("Skipping excluded executable %s -> %s", candidate, real_path)
                continue
            logger.debug("Resolved %s to %s (via %s)", program, real_path, candidate)
            return ExecutablePath(
                real_path=real_path,
                virtual_path=os.path.abspath(candidate),
                invoked_as=program,
            )
        raise ExecutableNotFoundError(
            f"Could not find the executable file: {program}", path=program
        )


def find_executable(program: str, exclude: str = "") -> ExecutablePath:
    return ExecutableResolver().find(program, exclude)
