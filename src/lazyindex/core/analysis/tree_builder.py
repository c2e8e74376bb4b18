from __future__ import annotations

"""
Namespace Tree Builder.

Folds relative file paths into a nested Namespace tree whose shape mirrors
the directory layout:

    'search/results/keyword.table.js'

becomes

    {"search": {"results": {"keywordTable": Leaf("search/results/keyword.table.js")}}}

A directory and a file may derive the same key ('overview/' and
'overview.js'). The file then yields its key to the directory and is kept
under the key with the conflict suffix appended ('overviewJs').
"""

import logging
import os
from typing import Iterable, List, Optional

from lazyindex.core.analysis.identifiers import derive_identifier, strip_extension
from lazyindex.domain.constants import DEFAULT_CONFLICT_SUFFIX, DEFAULT_EXTENSIONS
from lazyindex.domain.errors import NamespaceConflictError
from lazyindex.domain.tree_models import Leaf, Namespace

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def resolve_conflict(parent: Namespace, key: str, conflict_suffix: str = DEFAULT_CONFLICT_SUFFIX) -> Optional[str]:
    """
    Make room for a namespace at parent[key] if a leaf currently holds it.

    The leaf is moved to parent[key + conflict_suffix] and parent[key] is
    reset to an empty namespace. Absent keys and namespaces are left alone.

    Args:
        parent: Namespace that owns the key.
        key: Key about to be used as a namespace.
        conflict_suffix: Suffix appended to the relocated key.

    Returns:
        Optional[str]: The relocated key, or None if nothing moved.

    Raises:
        NamespaceConflictError: If the relocation target is already occupied.
    """
    current = parent.get(key)
    if not isinstance(current, Leaf):
        return None

    relocated = key + conflict_suffix
    if relocated in parent:
        raise NamespaceConflictError(
            relocated, current.rel_path, "relocation target is already occupied"
        )

    parent[relocated] = current
    parent[key] = {}
    logger.debug(f"Relocated '{current.rel_path}' from '{key}' to '{relocated}'")
    return relocated


def insert_path(
        root: Namespace,
        rel_path: str,
        *,
        conflict_suffix: str = DEFAULT_CONFLICT_SUFFIX,
        extensions: Iterable[str] = DEFAULT_EXTENSIONS,
        sep: str = os.sep,
        leaf_prefix: str = "",
        relocated: Optional[List[str]] = None,
) -> Namespace:
    """
    Insert one relative file path into the tree, in place.

    Every directory segment becomes a namespace (created on demand, after
    giving the conflict resolver a chance to move a leaf out of the way);
    the file itself becomes a Leaf in the innermost namespace.

    Args:
        root: Tree being built.
        rel_path: Path relative to the indexed root, using 'sep'.
        conflict_suffix: Suffix for leaves that yield their key.
        extensions: Indexed extensions, stripped from the file name.
        sep: Separator used by 'rel_path'.
        leaf_prefix: Forward-slash prefix leading from the output location
                     to the indexed root ('' when they coincide).
        relocated: Optional accumulator of dotted key paths created by
                   conflict relocation.

    Returns:
        Namespace: The same root, for chaining.

    Raises:
        ValueError: If the path holds no file name.
        NamespaceConflictError: On a collision relocation cannot solve.
    """
    parts = [p for p in rel_path.split(sep) if p and p != "."]
    if not parts:
        raise ValueError(f"Cannot index an empty relative path: {rel_path!r}")

    extensions = list(extensions)
    leaf = Leaf(rel_path=leaf_prefix + "/".join(parts))
    trail: List[str] = []
    node = root

    # Directory levels
    for segment in parts[:-1]:
        key = derive_identifier(segment)
        moved = resolve_conflict(node, key, conflict_suffix)
        if moved is not None and relocated is not None:
            relocated.append(".".join(trail + [moved]))

        child = node.get(key)
        if child is None:
            child = {}
            node[key] = child
        node = child
        trail.append(key)

    # File level
    leaf_key = derive_identifier(strip_extension(parts[-1], extensions))
    _attach_leaf(node, leaf_key, leaf, conflict_suffix, extensions, trail, relocated)
    return root


def build_tree(
        rel_paths: Iterable[str],
        *,
        conflict_suffix: str = DEFAULT_CONFLICT_SUFFIX,
        extensions: Iterable[str] = DEFAULT_EXTENSIONS,
        sep: str = os.sep,
) -> Namespace:
    """Build a fresh tree from a sequence of relative paths."""
    extensions = list(extensions)
    root: Namespace = {}
    for rel_path in rel_paths:
        insert_path(root, rel_path, conflict_suffix=conflict_suffix, extensions=extensions, sep=sep)
    return root

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _natural_key(leaf: Leaf, extensions: List[str]) -> str:
    """Key a leaf derives to before any relocation."""
    filename = leaf.rel_path.rsplit("/", 1)[-1]
    return derive_identifier(strip_extension(filename, extensions))


def _attach_leaf(
        node: Namespace,
        key: str,
        leaf: Leaf,
        conflict_suffix: str,
        extensions: List[str],
        trail: List[str],
        relocated: Optional[List[str]],
) -> None:
    """
    Place a leaf under its key, honoring existing namespaces and leaves.

    A namespace already holding the key pushes the leaf to the suffixed key,
    which is where it would have been relocated had the file come first.
    Two distinct files deriving the same key keep the one whose path sorts
    last, whether they meet under the key or under its suffixed form. A
    file that derives the suffixed key by itself cannot share that slot.
    """
    target = key
    if isinstance(node.get(key), dict):
        target = key + conflict_suffix

    existing = node.get(target)

    if existing is None:
        node[target] = leaf
        if target != key:
            logger.debug(f"Placed '{leaf.rel_path}' under '{target}': '{key}' is a namespace")
            if relocated is not None:
                relocated.append(".".join(trail + [target]))
        return

    if existing == leaf:
        return

    if isinstance(existing, dict):
        raise NamespaceConflictError(target, leaf.rel_path, "key is already a namespace")

    if _natural_key(existing, extensions) != key:
        raise NamespaceConflictError(
            target, leaf.rel_path, f"key already holds file '{existing.rel_path}' of another name"
        )

    winner = max(existing, leaf, key=lambda item: item.rel_path)
    logger.warning(
        f"Files '{existing.rel_path}' and '{leaf.rel_path}' both derive key '{key}'; "
        f"keeping '{winner.rel_path}'"
    )
    node[target] = winner
