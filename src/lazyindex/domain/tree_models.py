from __future__ import annotations

"""
Namespace Tree Data Models.

Provides the recursive type definitions used while a directory is folded
into a tree of nested export namespaces.
"""

from dataclasses import dataclass
from typing import Dict, Union

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Leaf:
    """
    Represents a terminal export: one on-demand load of a single file.

    Attributes:
        rel_path: Path of the file relative to the output location,
                  always forward-slash separated (e.g. 'search/account.page.js').
    """
    rel_path: str

    @property
    def require_path(self) -> str:
        """Module specifier used by the generated load expression."""
        if self.rel_path.startswith("../"):
            return self.rel_path
        return f"./{self.rel_path}"


Namespace = Dict[str, Union["Namespace", Leaf]]
