# Licensed under the Apache License, Version 2.0
import logging
from pathlib import Path

from ..ports.reporter import ErrorReporterPort

logger = logging.getLogger(__name__)


class LoggingReporter(ErrorReporterPort):
    def report(self, path: Path, error: Exception) -> None:
        logger.warning("Failed to traverse directory %s: %s", path, error)
