from __future__ import annotations

"""
Unit tests for the Indexing Eligibility Filters.

Verifies:
1. The default predicate (extension, generated index, vendored code).
2. Predicates assembled from configuration.
3. Regex compilation and matching helpers.
"""

import os
import re
from pathlib import Path

from lazyindex.core.pipeline.components.filters import (
    build_predicate,
    compile_patterns,
    default_should_be_indexed,
    has_extension,
    is_vendored,
    matches_any,
    path_segments,
)
from lazyindex.domain.config import IndexConfig


def make_config(root: Path, **kwargs) -> IndexConfig:
    output = kwargs.pop("output", str(root / "index.js"))
    return IndexConfig(directory=str(root), output=output, **kwargs)

# -----------------------------------------------------------------------------
# Helpers
# -----------------------------------------------------------------------------

def test_compile_patterns_discards_invalid_regex():
    compiled = compile_patterns(["(unclosed", r"\.spec\.js$"])

    assert len(compiled) == 1
    assert isinstance(compiled[0], re.Pattern)


def test_matches_any_searches_anywhere():
    compiled = compile_patterns([r"fixtures/"])

    assert matches_any("test/fixtures/a.js", compiled)
    assert not matches_any("lib/a.js", compiled)
    assert not matches_any("lib/a.js", [])


def test_path_segments_handles_both_separators():
    assert path_segments("a\\b/c.js") == ["a", "b", "c.js"]
    assert path_segments("/abs//x.js") == ["abs", "x.js"]


def test_is_vendored_checks_directories_only():
    assert is_vendored("lib/node_modules/dep/index.js")
    assert not is_vendored("lib/node_modules")
    assert not is_vendored("lib/node_modules_helper/a.js")


def test_has_extension_requires_a_stem():
    assert has_extension("a.js", [".js"])
    assert not has_extension(".js", [".js"])
    assert not has_extension("a.jsx", [".js"])
    assert has_extension("a.mjs", [".js", ".mjs"])

# -----------------------------------------------------------------------------
# Default Predicate
# -----------------------------------------------------------------------------

def test_default_predicate_accepts_plain_modules(tmp_path):
    assert default_should_be_indexed(str(tmp_path / "search" / "account.page.js"))


def test_default_predicate_rejections(tmp_path):
    assert not default_should_be_indexed(str(tmp_path / "index.js"))
    assert not default_should_be_indexed(str(tmp_path / "notes.md"))
    assert not default_should_be_indexed(str(tmp_path / "node_modules" / "dep" / "a.js"))


def test_default_predicate_judges_vendoring_below_root(tmp_path):
    root = tmp_path / "node_modules" / "pkg"

    assert not default_should_be_indexed(str(root / "a.js"))
    assert default_should_be_indexed(str(root / "a.js"), root=str(root))
    assert not default_should_be_indexed(str(root / "node_modules" / "x" / "a.js"), root=str(root))


def test_built_predicate_agrees_with_default_rule(tmp_path):
    predicate = build_predicate(make_config(tmp_path))
    candidates = ["util.js", "index.js", "notes.md", "node_modules/dep/a.js", "lib/a.page.js"]

    for rel in candidates:
        path = os.path.join(str(tmp_path), *rel.split("/"))
        assert predicate(path) == default_should_be_indexed(path)

# -----------------------------------------------------------------------------
# Configured Predicate
# -----------------------------------------------------------------------------

def test_custom_predicate_is_used_as_is(tmp_path):
    def only_pages(path: str) -> bool:
        return path.endswith(".page.js")

    assert build_predicate(make_config(tmp_path, should_be_indexed=only_pages)) is only_pages


def test_built_predicate_matches_default_rules(tmp_path):
    predicate = build_predicate(make_config(tmp_path))

    assert predicate(str(tmp_path / "util.js"))
    assert not predicate(str(tmp_path / "index.js"))
    assert not predicate(str(tmp_path / "style.css"))
    assert not predicate(str(tmp_path / "node_modules" / "dep" / "a.js"))


def test_built_predicate_excludes_custom_output_name(tmp_path):
    predicate = build_predicate(make_config(tmp_path, output=str(tmp_path / "main.js")))

    assert not predicate(str(tmp_path / "lib" / "main.js"))
    assert predicate(str(tmp_path / "index.js"))


def test_built_predicate_applies_exclusions_to_relative_path(tmp_path):
    predicate = build_predicate(make_config(tmp_path, exclude_patterns=[r"\.spec\.js$", r"^fixtures/"]))

    assert not predicate(str(tmp_path / "a.spec.js"))
    assert not predicate(os.path.join(str(tmp_path), "fixtures", "data.js"))
    assert predicate(os.path.join(str(tmp_path), "lib", "fixtures.js"))


def test_built_predicate_honours_extensions(tmp_path):
    predicate = build_predicate(make_config(tmp_path, extensions=[".mjs", ".cjs"]))

    assert predicate(str(tmp_path / "a.mjs"))
    assert predicate(str(tmp_path / "b.cjs"))
    assert not predicate(str(tmp_path / "c.js"))


def test_root_inside_vendored_directory_is_indexed(tmp_path):
    """A package living under node_modules can still index itself."""
    root = tmp_path / "node_modules" / "pkg"
    predicate = build_predicate(make_config(root))

    assert predicate(str(root / "lib" / "a.js"))
    assert not predicate(str(root / "node_modules" / "dep" / "a.js"))
