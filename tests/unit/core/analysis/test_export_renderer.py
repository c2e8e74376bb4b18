from __future__ import annotations

"""
Unit tests for the Export Module Renderer.

Verifies:
1. Object literal layout (indentation, separators, empty namespaces).
2. Accessor and eager leaf forms.
3. Key quoting and require specifier escaping.
4. Header comment wrapping.
"""

from lazyindex.core.analysis.export_renderer import (
    format_header,
    format_key,
    render_leaf,
    render_module,
    render_object_literal,
    require_expression,
)
from lazyindex.domain.constants import DEFAULT_HEADER
from lazyindex.domain.tree_models import Leaf

PAGES_TREE = {
    "search": {
        "accountPage": Leaf("search/account.page.js"),
        "keywordPage": Leaf("search/keyword.page.js"),
        "results": {"accountTable": Leaf("search/results/account.table.js")},
    },
    "transactionsPage": Leaf("transactions.page.js"),
}

LAZY_BODY = (
    "{\n"
    "    search: {\n"
    "        get accountPage() { return require('./search/account.page.js'); },\n"
    "        get keywordPage() { return require('./search/keyword.page.js'); },\n"
    "        results: {\n"
    "            get accountTable() { return require('./search/results/account.table.js'); }\n"
    "        }\n"
    "    },\n"
    "    get transactionsPage() { return require('./transactions.page.js'); }\n"
    "}"
)

# -----------------------------------------------------------------------------
# Object Literal
# -----------------------------------------------------------------------------

def test_lazy_object_literal_layout():
    assert render_object_literal(PAGES_TREE) == LAZY_BODY


def test_eager_object_literal_layout():
    body = render_object_literal({"util": Leaf("util.js"), "a": {"b": Leaf("a/b.js")}}, lazy=False)

    assert body == (
        "{\n"
        "    util: require('./util.js'),\n"
        "    a: {\n"
        "        b: require('./a/b.js')\n"
        "    }\n"
        "}"
    )


def test_empty_namespaces_collapse():
    assert render_object_literal({}) == "{}"
    assert render_object_literal({"empty": {}}) == "{\n    empty: {}\n}"


def test_custom_indent_width():
    assert render_object_literal({"a": Leaf("a.js")}, indent=2, lazy=False) == (
        "{\n  a: require('./a.js')\n}"
    )

# -----------------------------------------------------------------------------
# Leaves & Keys
# -----------------------------------------------------------------------------

def test_render_leaf_forms():
    leaf = Leaf("util.js")
    assert render_leaf("util", leaf) == "get util() { return require('./util.js'); }"
    assert render_leaf("util", leaf, lazy=False) == "util: require('./util.js')"


def test_require_expression_handles_parent_paths_and_quotes():
    assert require_expression(Leaf("../src/a.js")) == "require('../src/a.js')"
    assert require_expression(Leaf("it's.js")) == "require('./it\\'s.js')"


def test_format_key_quotes_non_identifiers():
    assert format_key("accountPage") == "accountPage"
    assert format_key("$el_2") == "$el_2"
    assert format_key("2fa") == '"2fa"'
    assert format_key("") == '""'


def test_quoted_key_in_accessor():
    body = render_object_literal({"2fa": Leaf("2fa.js")})
    assert body == "{\n    get \"2fa\"() { return require('./2fa.js'); }\n}"

# -----------------------------------------------------------------------------
# Module & Header
# -----------------------------------------------------------------------------

def test_render_module_with_default_header():
    text = render_module(PAGES_TREE, DEFAULT_HEADER)

    assert text == (
        "/**\n"
        " This file is auto-generated by `lazyindex`.\n"
        " Do not edit it by hand: re-run the generator instead.\n"
        " */\n"
        f"module.exports = {LAZY_BODY};\n"
    )


def test_render_module_empty_tree():
    assert render_module({}, "Generated") == "/**\n Generated\n */\nmodule.exports = {};\n"


def test_format_header_wraps_long_lines():
    header = "word " * 40
    lines = format_header(header, width=30).split("\n")

    assert len(lines) > 1
    assert all(line.startswith(" word") for line in lines)
    assert all(len(line) <= 31 for line in lines)


def test_format_header_keeps_blank_lines_and_escapes_terminator():
    assert format_header("first\n\nsecond") == " first\n\n second"
    assert "*/" not in format_header("closes */ early")
    assert format_header("") == ""
