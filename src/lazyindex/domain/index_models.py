from __future__ import annotations

"""
Indexing Result Models.

Defines the result object and factory functions used to communicate the
outcome of an indexing run between the engine and the interface layer.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class IndexResult:
    """
    Outcome of a complete indexing run.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        directory: Absolute root directory that was scanned.
        output_path: Absolute destination of the generated module.
        indexed_files: Relative paths inserted into the tree, in scan order.
        skipped_files: Number of candidates rejected by the predicate.
        relocated_keys: Dotted key paths created by conflict relocation.
        content: Generated module text (empty on failure).
        dry_run: Whether the write step was skipped.
        summary: Free-form execution statistics.
    """
    ok: bool
    error: str

    directory: str
    output_path: str

    indexed_files: List[str] = field(default_factory=list)
    skipped_files: int = 0
    relocated_keys: List[str] = field(default_factory=list)

    content: str = ""
    dry_run: bool = False

    summary: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        directory: str,
        output_path: str = "",
        summary_extra: Optional[Dict[str, Any]] = None,
) -> IndexResult:
    """
    Create a failed indexing result.

    Args:
        error: Detailed error description.
        directory: The root directory of the failed run.
        output_path: Destination that was (or would have been) written.
        summary_extra: Additional metadata for the summary payload.

    Returns:
        IndexResult: An immutable error result object.
    """
    return IndexResult(
        ok=False,
        error=error,
        directory=directory,
        output_path=output_path,
        summary=summary_extra or {},
    )


def create_success_result(
        directory: str,
        output_path: str,
        indexed_files: List[str],
        skipped_files: int,
        relocated_keys: List[str],
        content: str,
        dry_run: bool = False,
        summary_extra: Optional[Dict[str, Any]] = None,
) -> IndexResult:
    """
    Create a successful indexing result.

    Returns:
        IndexResult: An immutable success result object.
    """
    return IndexResult(
        ok=True,
        error="",
        directory=directory,
        output_path=output_path,
        indexed_files=list(indexed_files),
        skipped_files=skipped_files,
        relocated_keys=list(relocated_keys),
        content=content,
        dry_run=dry_run,
        summary=summary_extra or {},
    )
