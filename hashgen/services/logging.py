"""
stdlib-backed logger for hashgen diagnostics.

Output goes to stderr, to a rotating ~/.hashgen/hashgen.log, to both or to
neither, as selected by the ``[logging]`` config section.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

from ..core.interfaces.logger import ILogger
from ..core.models.config import LoggingConfig


class HashgenLogger(ILogger):
    """ILogger writing through a dedicated, non-propagating stdlib logger."""

    LOG_FILE_PATH = Path.home() / ".hashgen" / "hashgen.log"
    MAX_FILE_SIZE = 10 * 1024 * 1024
    BACKUP_COUNT = 3
    FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

    def __init__(
        self,
        config: LoggingConfig | None = None,
        *,
        name: str = "hashgen",
        log_file: Path | None = None,
    ) -> None:
        config = config or LoggingConfig()

        self._logger = logging.getLogger(name)
        self._logger.setLevel(config.level.upper())
        self._logger.propagate = False
        # Rebuilding the logger (e.g. after reset/bootstrap) must not stack handlers
        for handler in self._logger.handlers[:]:
            self._logger.removeHandler(handler)
            handler.close()

        if config.console:
            self._attach(logging.StreamHandler(sys.stderr))
        if config.file:
            path = log_file or self.LOG_FILE_PATH
            path.parent.mkdir(parents=True, exist_ok=True)
            self._attach(
                RotatingFileHandler(path, maxBytes=self.MAX_FILE_SIZE, backupCount=self.BACKUP_COUNT)
            )

    def _attach(self, handler: logging.Handler) -> None:
        handler.setFormatter(logging.Formatter(self.FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        self._logger.addHandler(handler)

    def debug(self, message: str, *args: Any) -> None:
        self._logger.debug(message, *args)

    def warning(self, message: str, *args: Any) -> None:
        self._logger.warning(message, *args)

    @property
    def level(self) -> int:
        return self._logger.level

    @property
    def handlers(self) -> list[logging.Handler]:
        return list(self._logger.handlers)


class NullLogger(ILogger):
    """Discards everything; used when nothing was bootstrapped."""

    def debug(self, message: str, *args: Any) -> None:
        pass

    def warning(self, message: str, *args: Any) -> None:
        pass
