from __future__ import annotations

"""
Core orchestration pipeline.

This module coordinates one indexing run:
1. Validates the configuration and the root directory.
2. Streams candidate files from the scanner and filters them.
3. Folds every eligible file into the namespace tree.
4. Sorts and renders the tree into the generated module.
5. Writes the module to its destination (skipped on dry runs).

Configuration is an explicit value; runs share no state.
"""

import logging
import os
from typing import Any, Dict, List, Optional, Union

from lazyindex.core.analysis.export_renderer import render_module
from lazyindex.core.analysis.tree_builder import insert_path
from lazyindex.core.analysis.tree_sorter import sort_tree
from lazyindex.core.pipeline.components.filters import build_predicate
from lazyindex.core.pipeline.components.writer import write_module
from lazyindex.core.pipeline.stages.validator import validate_config
from lazyindex.core.services.scanner import iter_files
from lazyindex.domain.config import IndexConfig
from lazyindex.domain.errors import LazyIndexError, PathOutsideRootError
from lazyindex.domain.index_models import IndexResult, create_error_result, create_success_result
from lazyindex.domain.tree_models import Namespace
from lazyindex.infra.fs import is_within, relative_prefix

logger = logging.getLogger(__name__)


def run_indexer(
        config: Union[IndexConfig, Dict[str, Any], None] = None,
        *,
        dry_run: bool = False,
) -> IndexResult:
    """
    Execute a full indexing run.

    Args:
        config: An IndexConfig, a dict of overrides merged with the defaults,
                or None for a run with defaults only.
        dry_run: If True, generate the module text without writing it.

    Returns:
        IndexResult: Status, generated content and run statistics.
    """
    logger.info("Indexing run started.")

    # -------------------------------------------------------------------------
    # 1) Config & Path Validation
    # -------------------------------------------------------------------------
    cfg, warnings = validate_config(config, strict=False)
    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    root = os.path.abspath(cfg.directory)
    output_path = os.path.abspath(cfg.output)

    if not os.path.isdir(root):
        msg = f"Invalid input directory: {root}"
        logger.error(msg)
        return create_error_result(msg, root, output_path)

    # -------------------------------------------------------------------------
    # 2) Scan & Tree Construction
    # -------------------------------------------------------------------------
    should_be_indexed = build_predicate(cfg)
    leaf_prefix = relative_prefix(root, os.path.dirname(output_path))

    tree: Namespace = {}
    indexed: List[str] = []
    relocated: List[str] = []
    skipped = 0

    try:
        for path in iter_files(root):
            if os.path.normcase(path) == os.path.normcase(output_path) or not should_be_indexed(path):
                skipped += 1
                continue

            rel_path = relativize(path, root)
            insert_path(
                tree,
                rel_path,
                conflict_suffix=cfg.append_to_conflicts,
                extensions=cfg.extensions,
                leaf_prefix=leaf_prefix,
                relocated=relocated,
            )
            indexed.append(rel_path)
    except LazyIndexError as e:
        logger.error(f"Indexing aborted: {e}")
        return create_error_result(str(e), root, output_path)

    logger.info(f"Indexed {len(indexed)} file(s), skipped {skipped}.")
    for key_path in relocated:
        logger.info(f"Conflict resolved: file exported as '{key_path}'")

    # -------------------------------------------------------------------------
    # 3) Rendering
    # -------------------------------------------------------------------------
    content = render_module(sort_tree(tree), cfg.header, lazy=cfg.lazy)

    summary = {
        "indexed": len(indexed),
        "skipped": skipped,
        "relocated": len(relocated),
        "lazy": cfg.lazy,
        "dry_run": dry_run,
    }

    # -------------------------------------------------------------------------
    # 4) Persistence
    # -------------------------------------------------------------------------
    if dry_run:
        logger.info("Dry run: skipping write of the generated module.")
    else:
        try:
            write_module(output_path, content)
        except OSError as e:
            msg = f"Failed to write output file '{output_path}': {e}"
            logger.error(msg)
            return create_error_result(msg, root, output_path, summary_extra=summary)
        logger.info(f"Output file generated in {output_path}")

    return create_success_result(
        root, output_path, indexed, skipped, relocated, content,
        dry_run=dry_run, summary_extra=summary,
    )


def relativize(path: str, root: str) -> str:
    """
    Strip the scanned root from an absolute candidate path.

    Args:
        path: Absolute path yielded by the scanner.
        root: Absolute scanned root.

    Returns:
        str: Path relative to root, host separators, no leading separator.

    Raises:
        PathOutsideRootError: If the path does not live under root.
    """
    if not is_within(path, root) or os.path.normcase(os.path.abspath(path)) == os.path.normcase(root):
        raise PathOutsideRootError(path, root)
    return os.path.relpath(os.path.abspath(path), root).lstrip(os.sep)


def generate_index(config: Optional[Dict[str, Any]] = None, **overrides: Any) -> IndexResult:
    """
    Convenience wrapper: run_indexer with keyword overrides.

    >>> generate_index(directory="lib", output="lib/index.js")  # doctest: +SKIP
    """
    merged: Dict[str, Any] = dict(config or {})
    merged.update(overrides)
    return run_indexer(merged)
