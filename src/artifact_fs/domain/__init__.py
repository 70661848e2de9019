from .errors import (
    ArtifactFSError,
    ConfigurationError,
    DirectoryChangeError,
    ExecutableNotFoundError,
    FilesystemError,
)
from .models import ExecutablePath, FileMetadata, Filter, FilterMode, MatchKind

__all__ = [
    "ArtifactFSError",
    "ConfigurationError",
    "DirectoryChangeError",
    "ExecutableNotFoundError",
    "ExecutablePath",
    "FileMetadata",
    "FilesystemError",
    "Filter",
    "FilterMode",
    "MatchKind",
]
