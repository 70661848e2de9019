"""Filesystem primitives for a build-artifact cache."""

from .domain import (
    ArtifactFSError,
    ConfigurationError,
    DirectoryChangeError,
    ExecutableNotFoundError,
    ExecutablePath,
    FileMetadata,
    FilesystemError,
    Filter,
)
from .domain.paths import (
    append_path,
    canonicalize_path,
    change_extension,
    get_dir_part,
    get_extension,
    get_file_part,
)
from .durable import append, copy, link_or_copy, move, write_atomic
from .operations import (
    create_dir,
    create_dir_with_parents,
    dir_exists,
    file_exists,
    get_cwd,
    get_temp_dir,
    get_unique_id,
    get_user_home_dir,
    human_readable_size,
    read,
    remove_dir,
    remove_file,
    resolve_path,
    set_cwd,
    touch,
    write,
)
from .scoped import ScopedWorkDir, TmpFile
from .services import (
    DirectoryWalker,
    ExecutableResolver,
    WalkErrorPolicy,
    find_executable,
    get_file_info,
    walk_directory,
)

__version__ = "0.1.0"

__all__ = [
    "ArtifactFSError",
    "ConfigurationError",
    "DirectoryChangeError",
    "DirectoryWalker",
    "ExecutableNotFoundError",
    "ExecutablePath",
    "ExecutableResolver",
    "FileMetadata",
    "FilesystemError",
    "Filter",
    "ScopedWorkDir",
    "TmpFile",
    "WalkErrorPolicy",
    "append",
    "append_path",
    "canonicalize_path",
    "change_extension",
    "copy",
    "create_dir",
    "create_dir_with_parents",
    "dir_exists",
    "file_exists",
    "find_executable",
    "get_cwd",
    "get_dir_part",
    "get_extension",
    "get_file_info",
    "get_file_part",
    "get_temp_dir",
    "get_unique_id",
    "get_user_home_dir",
    "human_readable_size",
    "link_or_copy",
    "move",
    "read",
    "remove_dir",
    "remove_file",
    "resolve_path",
    "set_cwd",
    "touch",
    "walk_directory",
    "write",
    "write_atomic",
]
