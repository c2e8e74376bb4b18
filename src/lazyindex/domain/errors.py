from __future__ import annotations

"""
Domain Exception Hierarchy.

All failures raised by the indexing core derive from LazyIndexError so the
engine can convert them into error results at a single boundary.
"""


class LazyIndexError(Exception):
    """Base class for every indexing failure."""


class NamespaceConflictError(LazyIndexError):
    """
    Raised when a key collision cannot be resolved by relocating a leaf.

    Attributes:
        key: The key that could not be claimed.
        rel_path: Relative path of the file being inserted.
    """

    def __init__(self, key: str, rel_path: str, detail: str = "") -> None:
        self.key = key
        self.rel_path = rel_path
        msg = f"Unresolvable namespace conflict on key '{key}' while indexing '{rel_path}'"
        if detail:
            msg = f"{msg}: {detail}"
        super().__init__(msg)


class PathOutsideRootError(LazyIndexError):
    """Raised when a candidate path does not live under the scanned root."""

    def __init__(self, path: str, root: str) -> None:
        self.path = path
        self.root = root
        super().__init__(f"Path '{path}' is not located under the indexed root '{root}'")


class ConfigError(LazyIndexError):
    """Raised by strict configuration validation and unreadable config files."""
