from __future__ import annotations

"""
Logging Settings.

The indexer logs progress (files indexed, conflicts relocated, output
written) to stderr so that stdout stays free for --dry-run and --json
payloads. An optional rotating file keeps a persistent trace.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

# Accepted severity names
_LEVEL_MAP: Dict[str, int] = {
    name: getattr(logging, name)
    for name in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
}
_LEVEL_MAP["WARN"] = logging.WARNING


@dataclass(frozen=True)
class LoggingConfig:
    """
    Settings applied once by configure_logging().

    Attributes:
        level: Severity name; unknown names fall back to INFO.
        console: Emit records on stderr.
        log_file: Optional path of a rotating log file.
        max_bytes: Size at which the log file rolls over.
        backup_count: Rolled-over files kept next to the active one.
        console_fmt: Record layout on stderr.
        file_fmt: Record layout in the log file.
        datefmt: Timestamp layout in the log file.
    """
    level: str = "INFO"
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 1024 * 1024
    backup_count: int = 3

    console_fmt: str = "%(levelname)s | %(message)s"
    file_fmt: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"

    @classmethod
    def for_cli(cls, debug: bool = False, log_file: Optional[str] = None) -> "LoggingConfig":
        """Settings for a command line run: INFO, or DEBUG with --debug."""
        return cls(level="DEBUG" if debug else "INFO", console=True, log_file=log_file)
