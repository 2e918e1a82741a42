"""
Logging setup for the directory service.

Uvicorn and pytest both install handlers on the root logger before the
application is built, so the configured level is applied to the
``user_directory`` package logger rather than to the root.  A console
handler is only added when nobody else has configured one.
"""

import logging
from pathlib import Path
from typing import Optional

PACKAGE_LOGGER = "user_directory"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> logging.Logger:
    """Configure logging for the ``user_directory`` package.

    Parameters
    ----------
    level : str
        Level name such as ``"DEBUG"``; unknown names fall back to INFO.
    logfile : Optional[str]
        Extra file to write package records to.

    Returns
    -------
    logging.Logger
        The package logger.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    root = logging.getLogger()
    if not root.handlers:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)

    if logfile:
        log_path = str(Path(logfile).resolve())
        # Repeated create_app calls must not duplicate the file handler.
        attached = any(
            isinstance(handler, logging.FileHandler) and handler.baseFilename == log_path
            for handler in package_logger.handlers
        )
        if not attached:
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.setFormatter(formatter)
            package_logger.addHandler(file_handler)

    return package_logger
