from .errors import FilesystemError, FileScoutError
from .walk import FileCallback, WalkAction, WalkResult, WalkState

__all__ = [
    "FileCallback",
    "FilesystemError",
    "FileScoutError",
    "WalkAction",
    "WalkResult",
    "WalkState",
]
