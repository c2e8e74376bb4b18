from __future__ import annotations

"""
Configuration Domain Management.

Defines the immutable run configuration of the indexer, the factory for its
defaults, and the explicit merge of overrides coming from JSON files or the
command line. Configuration is always passed by value into a run; there is
no process-wide mutable state to override and restore.
"""

import json
import logging
import os
from dataclasses import asdict, dataclass, field, fields, replace
from typing import Any, Callable, Dict, List, Optional

from lazyindex.domain.constants import (
    DEFAULT_CONFLICT_SUFFIX,
    DEFAULT_EXTENSIONS,
    DEFAULT_HEADER,
    DEFAULT_OUTPUT_NAME,
)
from lazyindex.domain.errors import ConfigError

logger = logging.getLogger(__name__)

PathPredicate = Callable[[str], bool]

# Keys accepted under their historical camelCase spelling in config files
CONFIG_KEY_ALIASES: Dict[str, str] = {
    "shouldBeIndexed": "should_be_indexed",
    "appendToConflicts": "append_to_conflicts",
    "excludePatterns": "exclude_patterns",
}

# -----------------------------------------------------------------------------
# Configuration Model
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class IndexConfig:
    """
    Immutable settings of a single indexing run.

    Attributes:
        directory: Root directory to scan.
        output: Destination path of the generated module.
        should_be_indexed: Optional predicate over absolute candidate paths.
                           When None, a predicate is built from the
                           extensions, exclude_patterns and output fields.
        header: Text placed in the generated file's doc comment.
        append_to_conflicts: Suffix given to a leaf that yields its key
                             to a namespace of the same name.
        extensions: File extensions eligible for indexing.
        exclude_patterns: Regexes matched against the relative path of
                          each candidate; a match excludes the file.
        lazy: Emit accessor bindings (True) or eager requires (False).
    """
    directory: str
    output: str
    should_be_indexed: Optional[PathPredicate] = None
    header: str = DEFAULT_HEADER
    append_to_conflicts: str = DEFAULT_CONFLICT_SUFFIX
    extensions: List[str] = field(default_factory=lambda: list(DEFAULT_EXTENSIONS))
    exclude_patterns: List[str] = field(default_factory=list)
    lazy: bool = True


def config_keys() -> List[str]:
    """Return the names of every recognized configuration option."""
    return [f.name for f in fields(IndexConfig)]


def get_default_config() -> IndexConfig:
    """
    Generate the default configuration, anchored at the current directory.

    Returns:
        IndexConfig: Defaults for a run started from os.getcwd().
    """
    base = os.path.abspath(os.getcwd())
    return IndexConfig(
        directory=base,
        output=os.path.join(base, DEFAULT_OUTPUT_NAME),
    )


def merge_config(base: IndexConfig, overrides: Optional[Dict[str, Any]]) -> IndexConfig:
    """
    Apply known, non-None overrides on top of a base configuration.

    Unknown keys are ignored with a debug trace, aliases are translated.
    """
    if not overrides:
        return base

    changes: Dict[str, Any] = {}
    known = set(config_keys())
    for raw_key, value in overrides.items():
        key = CONFIG_KEY_ALIASES.get(raw_key, raw_key)
        if key not in known:
            logger.debug(f"Ignoring unknown configuration key: {raw_key}")
            continue
        if value is None:
            continue
        changes[key] = value

    return replace(base, **changes)


def config_to_dict(config: IndexConfig) -> Dict[str, Any]:
    """Serialize a configuration for display; predicates are shown by name."""
    predicate = config.should_be_indexed
    data = asdict(replace(config, should_be_indexed=None))
    data["should_be_indexed"] = getattr(predicate, "__name__", repr(predicate)) if predicate else None
    return data

# -----------------------------------------------------------------------------
# Persistence
# -----------------------------------------------------------------------------

def load_config(path: str) -> Dict[str, Any]:
    """
    Read a JSON file of configuration overrides.

    Relative 'directory' and 'output' values are resolved against the
    directory that contains the config file.

    Args:
        path: Path to the JSON configuration file.

    Returns:
        Dict[str, Any]: Raw overrides, to be validated by the caller.

    Raises:
        ConfigError: If the file cannot be read or is not a JSON object.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read config file '{path}': {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"Config file '{path}' is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config file '{path}' must contain a JSON object")

    base_dir = os.path.dirname(os.path.abspath(path))
    for key in ("directory", "output"):
        value = data.get(key)
        if isinstance(value, str) and value and not os.path.isabs(value):
            data[key] = os.path.join(base_dir, value)

    logger.debug(f"Loaded configuration overrides from {path}: {sorted(data)}")
    return data
