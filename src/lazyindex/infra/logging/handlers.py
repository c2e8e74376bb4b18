from __future__ import annotations

"""
Handler Factories.

Handlers installed by lazyindex carry a marker attribute, so a later
reconfiguration only removes its own handlers and leaves those of a host
application (or pytest's caplog) in place.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

from lazyindex.infra.fs import ensure_parent_dir

_HANDLER_TAG_ATTR: str = "_lazyindex_handler"


def _tag_handler(handler: logging.Handler) -> None:
    setattr(handler, _HANDLER_TAG_ATTR, True)


def _is_our_handler(handler: logging.Handler) -> bool:
    """True for handlers created by this package."""
    return bool(getattr(handler, _HANDLER_TAG_ATTR, False))


def _create_stream_handler(level_int: int, formatter: logging.Formatter) -> logging.Handler:
    """Console handler bound to the current stderr."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level_int)
    handler.setFormatter(formatter)
    _tag_handler(handler)
    return handler


def _create_rotating_file_handler(
        log_file: str,
        level_int: int,
        formatter: logging.Formatter,
        max_bytes: int,
        backup_count: int,
) -> Optional[RotatingFileHandler]:
    """
    Open the rotating log file, creating its directory if needed.

    An unusable location is reported on stderr and yields None: a broken
    log path must not stop the index from being generated.
    """
    try:
        ensure_parent_dir(log_file)
        handler = RotatingFileHandler(
            log_file,
            maxBytes=int(max_bytes),
            backupCount=int(backup_count),
            encoding="utf-8",
        )
    except OSError as e:
        sys.stderr.write(f"WARNING: Cannot open log file '{log_file}': {e}\n")
        return None

    handler.setLevel(level_int)
    handler.setFormatter(formatter)
    _tag_handler(handler)
    return handler
