from pathlib import Path
from typing import Union


class FileScoutError(Exception):
    """Base exception for domain-specific errors."""


class FilesystemError(FileScoutError):
    """Unreadable paths, permission issues, vanished files, etc."""

    def __init__(self, path: Union[str, Path], message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = Path(path)
