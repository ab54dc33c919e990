from .filesystem import FilesystemPort
from .reporter import ErrorReporterPort

__all__ = ["ErrorReporterPort", "FilesystemPort"]
