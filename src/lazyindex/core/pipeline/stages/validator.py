from __future__ import annotations

"""
Configuration Validation Service.

Gatekeeper between untrusted configuration sources (JSON files, CLI flags,
library callers passing dicts) and the indexing engine. Coerces types,
resolves paths, and merges explicitly with the defaults to produce an
immutable IndexConfig.
"""

import logging
import os
from typing import Any, Dict, List, Tuple

from lazyindex.domain.config import (
    CONFIG_KEY_ALIASES,
    IndexConfig,
    config_keys,
    get_default_config,
    merge_config,
)
from lazyindex.domain.constants import DEFAULT_CONFLICT_SUFFIX, DEFAULT_EXTENSIONS, DEFAULT_OUTPUT_NAME
from lazyindex.domain.errors import ConfigError
from lazyindex.infra.fs import normalize_path

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[IndexConfig, List[str]]:
    """
    Validate and normalize a configuration source.

    An IndexConfig is accepted as-is. A dict is treated as a set of overrides
    on top of get_default_config(); when it names a directory but no output,
    the output defaults to 'index.js' inside that directory.

    Args:
        config: IndexConfig, dict of overrides, or None.
        strict: If True, raise ConfigError instead of coercing.

    Returns:
        Tuple[IndexConfig, List[str]]: The validated configuration and the
                                       list of warnings emitted on the way.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if isinstance(config, IndexConfig):
        return config, warnings

    if config is None:
        return defaults, warnings

    # 1. Base Type Validation
    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise ConfigError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    raw: Dict[str, Any] = {CONFIG_KEY_ALIASES.get(k, k): v for k, v in config.items()}
    clean: Dict[str, Any] = {}

    # 2. Paths
    directory = _as_str(raw.get("directory"), defaults.directory, "directory", warnings, strict)
    clean["directory"] = normalize_path(directory, defaults.directory)

    default_output = os.path.join(clean["directory"], DEFAULT_OUTPUT_NAME)
    output = _as_str(raw.get("output"), default_output, "output", warnings, strict)
    clean["output"] = normalize_path(output, default_output)

    # 3. Scalars
    if "header" in raw and raw["header"] is not None:
        if isinstance(raw["header"], str):
            clean["header"] = raw["header"]
        else:
            _reject("header", "str", raw["header"], warnings, strict)

    clean["append_to_conflicts"] = _as_str(
        raw.get("append_to_conflicts"), DEFAULT_CONFLICT_SUFFIX, "append_to_conflicts", warnings, strict
    )
    clean["lazy"] = _as_bool(raw.get("lazy"), defaults.lazy, "lazy", warnings, strict)

    # 4. Lists
    extensions = _as_list_str(raw.get("extensions"), DEFAULT_EXTENSIONS, "extensions", warnings, strict)
    clean["extensions"] = _normalize_extensions(extensions, warnings, strict)
    clean["exclude_patterns"] = _as_list_str(
        raw.get("exclude_patterns"), [], "exclude_patterns", warnings, strict
    )

    # 5. Predicate
    predicate = raw.get("should_be_indexed")
    if predicate is not None:
        if callable(predicate):
            clean["should_be_indexed"] = predicate
        else:
            _reject("should_be_indexed", "callable", predicate, warnings, strict)

    known = set(config_keys())
    unknown = sorted(k for k in raw if k not in known)
    for key in unknown:
        warnings.append(f"Unknown configuration key '{key}' ignored.")

    return merge_config(defaults, clean), warnings

# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _reject(field: str, expected: str, value: Any, warnings: List[str], strict: bool) -> None:
    msg = f"Invalid field '{field}': expected {expected}, received {type(value).__name__}."
    if strict:
        raise ConfigError(msg)
    warnings.append(f"{msg} Using fallback.")


def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    """Validate and sanitize string inputs; blank strings fall back."""
    if value is None:
        return fallback
    if isinstance(value, str):
        v = value.strip()
        return v if v else fallback

    _reject(field, "str", value, warnings, strict)
    return fallback


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    """Coerce various input types into native booleans."""
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if not strict:
        if isinstance(value, (int, float)) and value in (0, 1):
            warnings.append(f"Field '{field}' converted from number {value} to bool.")
            return bool(value)
        if isinstance(value, str):
            s = value.strip().lower()
            if s in ("true", "1", "yes", "y"):
                warnings.append(f"Field '{field}' converted from '{value}' to True.")
                return True
            if s in ("false", "0", "no", "n"):
                warnings.append(f"Field '{field}' converted from '{value}' to False.")
                return False

    _reject(field, "bool", value, warnings, strict)
    return fallback


def _as_list_str(value: Any, fallback: List[str], field: str, warnings: List[str], strict: bool) -> List[str]:
    """Ensure input is a list of sanitized strings, supporting CSV parsing."""
    if value is None:
        return list(fallback)

    if isinstance(value, str) and not strict:
        items = [x.strip() for x in value.split(",") if x.strip()]
        if items:
            warnings.append(f"Field '{field}' converted from CSV string to list.")
            return items
        return list(fallback)

    if isinstance(value, (list, tuple)):
        out: List[str] = []
        for i, item in enumerate(value):
            if isinstance(item, str):
                s = item.strip()
                if s:
                    out.append(s)
            else:
                msg = f"Invalid item in '{field}[{i}]': expected str."
                if strict:
                    raise ConfigError(msg)
                warnings.append(f"{msg} Item discarded.")
        return out if out else list(fallback)

    _reject(field, "list[str]", value, warnings, strict)
    return list(fallback)

# -----------------------------------------------------------------------------
# PRIVATE HELPERS: DOMAIN NORMALIZATION
# -----------------------------------------------------------------------------

def _normalize_extensions(exts: List[str], warnings: List[str], strict: bool) -> List[str]:
    """Ensure all file extensions are prefixed with a dot."""
    out: List[str] = []
    for ext in exts:
        e = ext.strip()
        if not e:
            continue
        if not e.startswith("."):
            if strict:
                raise ConfigError(f"Invalid extension '{ext}': must start with '.'.")
            warnings.append(f"Extension '{ext}' corrected to '.{e}'.")
            e = "." + e
        out.append(e)
    return out if out else list(DEFAULT_EXTENSIONS)
