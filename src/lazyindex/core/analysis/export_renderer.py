from __future__ import annotations

"""
Export Module Renderer.

Turns a sorted Namespace tree into the text of a CommonJS module. Leaves are
rendered straight from the structured tree, either as accessor bindings that
defer the require until the property is read:

    get accountPage() { return require('./search/account.page.js'); }

or, in eager mode, as plain properties:

    accountPage: require('./search/account.page.js')
"""

import json
import re
import textwrap
from typing import List

from lazyindex.domain.constants import HEADER_WRAP_WIDTH, INDENT_WIDTH
from lazyindex.domain.tree_models import Leaf, Namespace

MODULE_TEMPLATE = "/**\n{header}\n */\nmodule.exports = {body};\n"

_BARE_KEY_RX = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_module(tree: Namespace, header: str, *, lazy: bool = True, indent: int = INDENT_WIDTH) -> str:
    """
    Render the complete generated module: doc comment plus module.exports.

    Args:
        tree: Sorted namespace tree.
        header: Free text for the doc comment, wrapped line by line.
        lazy: Emit accessor bindings instead of eager requires.
        indent: Spaces per nesting level.

    Returns:
        str: The module source, newline terminated.
    """
    return MODULE_TEMPLATE.format(
        header=format_header(header),
        body=render_object_literal(tree, lazy=lazy, indent=indent),
    )


def render_object_literal(tree: Namespace, *, lazy: bool = True, indent: int = INDENT_WIDTH, level: int = 0) -> str:
    """
    Render a namespace as a JavaScript object literal.

    Layout follows JSON.stringify(obj, null, indent): one entry per line,
    entries joined by commas, empty namespaces collapsed to '{}'.
    """
    if not tree:
        return "{}"

    pad = " " * (indent * (level + 1))
    entries: List[str] = []
    for key, value in tree.items():
        name = format_key(key)
        if isinstance(value, Leaf):
            entries.append(pad + render_leaf(name, value, lazy=lazy))
        else:
            nested = render_object_literal(value, lazy=lazy, indent=indent, level=level + 1)
            entries.append(f"{pad}{name}: {nested}")

    closing = " " * (indent * level)
    return "{\n" + ",\n".join(entries) + "\n" + closing + "}"


def render_leaf(name: str, leaf: Leaf, *, lazy: bool = True) -> str:
    """Render one leaf entry under an already formatted key."""
    expression = require_expression(leaf)
    if lazy:
        return f"get {name}() {{ return {expression}; }}"
    return f"{name}: {expression}"


def require_expression(leaf: Leaf) -> str:
    """Load expression of a leaf, e.g. require('./util.js')."""
    specifier = leaf.require_path.replace("\\", "\\\\").replace("'", "\\'")
    return f"require('{specifier}')"


def format_key(key: str) -> str:
    """Leave identifier-shaped keys bare, double-quote anything else."""
    if _BARE_KEY_RX.match(key):
        return key
    return json.dumps(key)


def format_header(header: str, width: int = HEADER_WRAP_WIDTH) -> str:
    """
    Wrap header text for the leading doc comment.

    Every output line is prefixed with a single space. A '*/' sequence is
    broken up so the text cannot close the comment early.
    """
    lines: List[str] = []
    for raw in (header or "").replace("*/", "*\\/").splitlines() or [""]:
        wrapped = textwrap.wrap(raw.strip(), width=width) or [""]
        lines.extend(f" {line}".rstrip() for line in wrapped)
    return "\n".join(lines)
