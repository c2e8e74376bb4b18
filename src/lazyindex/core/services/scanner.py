from __future__ import annotations

"""
Directory Scanner.

Streams the absolute paths of regular files under a root directory. Vendored
dependency directories are pruned during the walk so their (often huge)
contents are never visited.
"""

import logging
import os
from typing import Iterable, Iterator

from lazyindex.domain.constants import VENDOR_DIR_NAMES

logger = logging.getLogger(__name__)


def iter_files(directory: str, exclude_dirs: Iterable[str] = VENDOR_DIR_NAMES) -> Iterator[str]:
    """
    Yield every regular file below 'directory' as an absolute path.

    Directories and files are visited in sorted order so repeated scans see
    the same sequence.

    Args:
        directory: Root of the scan.
        exclude_dirs: Directory names that are not descended into.

    Yields:
        str: Absolute file paths.
    """
    root_dir = os.path.abspath(directory)
    excluded = set(exclude_dirs)

    def _on_error(err: OSError) -> None:
        logger.warning(f"Cannot read directory '{err.filename}': {err.strerror}")

    for root, dirs, files in os.walk(root_dir, onerror=_on_error):
        # In-place pruning steers os.walk away from excluded directories
        dirs[:] = sorted(d for d in dirs if d not in excluded)
        for file_name in sorted(files):
            full_path = os.path.join(root, file_name)
            if os.path.isfile(full_path):
                yield full_path
