from .walk_service import DirectoryWalker, WalkErrorPolicy, get_file_info, walk_directory
from .executable_service import ExecutableResolver, find_executable


__all__ = [
    'DirectoryWalker',
    'ExecutableResolver',
    'WalkErrorPolicy',
    'find_executable',
    'get_file_info',
    'walk_directory',
]
