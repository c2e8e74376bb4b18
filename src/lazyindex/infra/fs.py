from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides path normalization and the relative-path arithmetic used to turn
absolute scan results into forward-slash module specifiers, uniformly on
Windows and Unix-like systems.
"""

import os
from typing import Optional

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)


def is_within(path: str, root: str) -> bool:
    """True if 'path' is 'root' itself or lies below it."""
    path = os.path.normcase(os.path.abspath(path))
    root = os.path.normcase(os.path.abspath(root))
    try:
        return os.path.commonpath([path, root]) == root
    except ValueError:
        # Different drives on Windows
        return False


def to_posix(path: str) -> str:
    """Replace the host separator with forward slashes."""
    return path.replace(os.sep, "/") if os.sep != "/" else path


def relative_prefix(root: str, output_dir: str) -> str:
    """
    Forward-slash prefix leading from the output directory to the root.

    Returns '' when both are the same directory, 'lib/' when the root is a
    subdirectory of the output location, '../src/' for a sibling, and so on.
    """
    rel = os.path.relpath(os.path.abspath(root), os.path.abspath(output_dir))
    if rel == os.curdir:
        return ""
    return to_posix(rel) + "/"

# -----------------------------------------------------------------------------
# DIRECTORY MANAGEMENT
# -----------------------------------------------------------------------------

def ensure_parent_dir(path: str) -> None:
    """
    Create the parent directory hierarchy of a target file if missing.

    Raises:
        OSError: If the hierarchy cannot be created.
    """
    parent = os.path.dirname(os.path.abspath(path))
    if parent and not os.path.isdir(parent):
        os.makedirs(parent, exist_ok=True)
