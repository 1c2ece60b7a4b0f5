from __future__ import annotations

"""
Logging Configuration Models.

Dataclass and level mapping used to initialize the diagnostic stream.
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


@dataclass(frozen=True)
class LoggingConfig:
    """
    Immutable specification for the logging subsystem.

    Attributes:
        level: Minimum severity level to capture.
        console: Flag to enable diagnostics on stderr.
        log_file: Optional path for a persistent, rotating copy.
        max_bytes: Size threshold before the log file rolls over.
        backup_count: Number of rolled-over files to keep.
        console_fmt: Format of stderr diagnostics.
        file_fmt: Format of log file entries.
        datefmt: Timestamp format for log file entries.
    """
    level: str = "WARNING"
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 1024 * 1024
    backup_count: int = 2

    console_fmt: str = "%(levelname)s | %(message)s"
    file_fmt: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"
