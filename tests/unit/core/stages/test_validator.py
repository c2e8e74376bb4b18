from __future__ import annotations

"""
Unit tests for the Configuration Validator.

Verifies:
1. Type coercion (String to Bool/List).
2. Default value injection and output derivation.
3. Strict mode validation.
"""

import os

import pytest

from lazyindex.core.pipeline.stages.validator import validate_config
from lazyindex.domain.config import IndexConfig
from lazyindex.domain.constants import DEFAULT_HEADER
from lazyindex.domain.errors import ConfigError


@pytest.fixture(autouse=True)
def in_tmp_cwd(tmp_path, monkeypatch):
    """Anchor defaults to a throwaway working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_validate_none_returns_defaults(in_tmp_cwd) -> None:
    cfg, warnings = validate_config(None)

    assert cfg.directory == os.getcwd()
    assert cfg.output == os.path.join(cfg.directory, "index.js")
    assert cfg.lazy is True
    assert cfg.append_to_conflicts == "Js"
    assert warnings == []


def test_validate_empty_dict_returns_defaults() -> None:
    cfg, warnings = validate_config({})

    assert cfg.extensions == [".js"]
    assert cfg.exclude_patterns == []
    assert cfg.header == DEFAULT_HEADER
    assert cfg.should_be_indexed is None
    assert warnings == []


def test_index_config_passes_through(tmp_path) -> None:
    original = IndexConfig(directory=str(tmp_path), output=str(tmp_path / "x.js"))
    cfg, warnings = validate_config(original)

    assert cfg is original
    assert warnings == []


def test_output_defaults_inside_directory(tmp_path) -> None:
    target = tmp_path / "pages"
    cfg, _ = validate_config({"directory": str(target)})

    assert cfg.directory == str(target)
    assert cfg.output == os.path.join(str(target), "index.js")


@pytest.mark.parametrize("output", [5, ["dist/index.js"], "   "])
def test_unusable_output_falls_back_inside_directory(tmp_path, output) -> None:
    target = tmp_path / "pages"
    cfg, warnings = validate_config({"directory": str(target), "output": output})

    assert cfg.output == os.path.join(str(target), "index.js")
    assert len(warnings) == (0 if isinstance(output, str) else 1)


def test_relative_paths_are_resolved_against_cwd(in_tmp_cwd) -> None:
    cfg, _ = validate_config({"directory": "lib", "output": "dist/index.js"})

    assert cfg.directory == os.path.join(os.getcwd(), "lib")
    assert cfg.output == os.path.join(os.getcwd(), "dist", "index.js")


def test_camel_case_aliases_are_accepted() -> None:
    def predicate(path: str) -> bool:
        return True

    cfg, warnings = validate_config({
        "appendToConflicts": "File",
        "excludePatterns": ["spec"],
        "shouldBeIndexed": predicate,
    })

    assert cfg.append_to_conflicts == "File"
    assert cfg.exclude_patterns == ["spec"]
    assert cfg.should_be_indexed is predicate
    assert warnings == []


def test_validate_converts_strings_to_bools() -> None:
    cfg, warnings = validate_config({"lazy": "no"})

    assert cfg.lazy is False
    assert any("converted" in w for w in warnings)


def test_extensions_from_csv_are_dotted() -> None:
    cfg, warnings = validate_config({"extensions": "js, mjs"})

    assert cfg.extensions == [".js", ".mjs"]
    assert any("CSV" in w for w in warnings)
    assert any("corrected" in w for w in warnings)


def test_invalid_values_fall_back() -> None:
    cfg, warnings = validate_config({
        "header": 5,
        "append_to_conflicts": "   ",
        "lazy": "maybe",
        "should_be_indexed": "not callable",
        "extensions": [1, ".ts"],
    })

    assert cfg.header == DEFAULT_HEADER
    assert cfg.append_to_conflicts == "Js"
    assert cfg.lazy is True
    assert cfg.should_be_indexed is None
    assert cfg.extensions == [".ts"]
    assert len(warnings) == 4


def test_unknown_keys_are_reported() -> None:
    cfg, warnings = validate_config({"recursive": True})

    assert warnings == ["Unknown configuration key 'recursive' ignored."]
    assert not hasattr(cfg, "recursive")


def test_non_dict_config_uses_defaults() -> None:
    cfg, warnings = validate_config(["directory"])

    assert isinstance(cfg, IndexConfig)
    assert len(warnings) == 1


@pytest.mark.parametrize("raw", [
    ["directory"],
    {"lazy": "maybe"},
    {"extensions": ["js"]},
    {"exclude_patterns": "a,b"},
    {"header": 3},
])
def test_strict_mode_raises(raw) -> None:
    with pytest.raises(ConfigError):
        validate_config(raw, strict=True)
