from __future__ import annotations

"""
Logging Configuration Models.

Defines the settings used to initialize diagnostics for folder_tree and
the mapping from level names to native logging constants.
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
    Immutable settings for the diagnostics subsystem.

    Attributes:
        level: Minimum severity level to capture.
        console: Send records to stderr. Tree output on stdout stays clean.
        log_file: Optional path for a rotating log file.
        max_bytes: Size per log segment before rotation.
        backup_count: Number of rotated segments to keep.
        console_fmt: Format for stderr records.
        file_fmt: Format for file records.
        datefmt: Timestamp format for file records.
    """
    level: str = "INFO"
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 1024 * 1024
    backup_count: int = 2

    console_fmt: str = "%(levelname)s | %(message)s"
    file_fmt: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"
