from __future__ import annotations

"""
Deterministic Tree Ordering.

Filesystem traversal order is not guaranteed, so every namespace is rebuilt
with its keys in ascending code-point order before rendering. Output is then
byte-identical for a given set of files.
"""

from typing import Union

from lazyindex.domain.tree_models import Leaf, Namespace


def sort_tree(node: Union[Namespace, Leaf]) -> Union[Namespace, Leaf]:
    """
    Return a copy of the tree with keys sorted at every level.

    Leaves (and any other non-mapping value) pass through unchanged.
    """
    if not isinstance(node, dict):
        return node
    return {key: sort_tree(node[key]) for key in sorted(node)}

