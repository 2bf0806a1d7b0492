from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Optional

FALLBACK_LOG_NAME = "dep-installer.log"

_CONSOLE_PREFIXES = {
    logging.DEBUG: "[debug] ",
    logging.WARNING: "WARNING: ",
    logging.ERROR: "ERROR: ",
    logging.CRITICAL: "ERROR: ",
}


class ConsoleFormatter(logging.Formatter):
    """Plain messages on the console; only non-INFO records get a prefix."""

    def format(self, record: logging.LogRecord) -> str:
        msg = super().format(record)
        return _CONSOLE_PREFIXES.get(record.levelno, "") + msg


def configure_logging(
    log_path: Optional[str] = None,
    level: int = logging.INFO,
    also_console: bool = True,
) -> Optional[str]:
    """Configure logging.

    The root logger level is always updated; handlers are only installed on
    the first call. When *log_path* cannot be opened, a file next to the
    working directory is used instead.

    Returns the actual log file path, or None when logging to console only.
    """

    logger = logging.getLogger()
    logger.setLevel(level)

    # Avoid duplicate handlers if configure_logging() is called multiple times.
    if getattr(logger, "_dep_installer_configured", False):
        return getattr(logger, "_dep_installer_log_path", log_path)

    chosen_path: Optional[str] = None
    handlers: list[logging.Handler] = []

    if log_path:
        fmt = logging.Formatter(
            fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S%z",
        )
        try:
            Path(os.path.dirname(log_path) or ".").mkdir(parents=True, exist_ok=True)
            file_handler: logging.Handler = logging.FileHandler(log_path)
            chosen_path = log_path
        except OSError:
            fallback = str(Path.cwd() / FALLBACK_LOG_NAME)
            file_handler = logging.FileHandler(fallback)
            chosen_path = fallback
        file_handler.setFormatter(fmt)
        handlers.append(file_handler)

    if also_console:
        console = logging.StreamHandler(sys.stdout)
        console.setFormatter(ConsoleFormatter("%(message)s"))
        handlers.append(console)

    for h in handlers:
        logger.addHandler(h)

    setattr(logger, "_dep_installer_configured", True)
    setattr(logger, "_dep_installer_log_path", chosen_path)

    if chosen_path:
        logging.getLogger(__name__).debug(
            "Logging initialized (requested=%s, actual=%s)", log_path, chosen_path
        )
    return chosen_path
