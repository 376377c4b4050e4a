from __future__ import annotations

"""
Logging Configuration Models.

Holds the record layouts shared by every run and the per-run settings the
CLI derives from its flags (verbosity and the optional log file).
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

_LEVEL_MAP: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

# Console records carry only severity and message
CONSOLE_FORMAT = "%(levelname)s | %(message)s"
FILE_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
FILE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class LoggingConfig:
    """
    Per-run settings for the logging subsystem.

    Attributes:
        level: Minimum severity level to capture.
        console: Flag to enable stderr stream output.
        log_file: Optional path for a persistent, rotating log.
        max_bytes: Size of a log segment before rotation.
        backup_count: Number of rotated segments kept beside the log file.
    """
    level: str = "INFO"
    console: bool = True
    log_file: Optional[str] = None
    max_bytes: int = 1024 * 1024
    backup_count: int = 3

    @classmethod
    def for_cli(cls, *, debug: bool, log_file: Optional[str]) -> LoggingConfig:
        """Settings for a CLI run: INFO (or DEBUG) to stderr, plus the optional file."""
        return cls(level="DEBUG" if debug else "INFO", console=True, log_file=log_file or None)
