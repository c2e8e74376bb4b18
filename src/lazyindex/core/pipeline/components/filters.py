from __future__ import annotations

"""
Indexing Eligibility Filters.

Decides which files found under the scanned root become exports. A file is
eligible when it is a regular source file with an indexed extension, is not
the generated index itself, does not live inside a vendored dependencies
directory, and matches none of the user supplied exclusion regexes.
"""

import os
import re
from typing import Iterable, List, Optional

from lazyindex.domain.config import IndexConfig, PathPredicate
from lazyindex.domain.constants import DEFAULT_EXTENSIONS, DEFAULT_OUTPUT_NAME, VENDOR_DIR_NAMES

# -----------------------------------------------------------------------------
# PATTERN COMPILATION AND MATCHING
# -----------------------------------------------------------------------------

def compile_patterns(patterns: Iterable[str]) -> List[re.Pattern]:
    """
    Transform raw regex strings into compiled Pattern objects.

    Malformed expressions are discarded so a bad user pattern cannot abort
    the scan.

    Args:
        patterns: Raw regex strings.

    Returns:
        List[re.Pattern]: Compiled regex objects.
    """
    compiled: List[re.Pattern] = []
    for p in patterns:
        try:
            compiled.append(re.compile(p))
        except re.error:
            continue
    return compiled


def matches_any(name: str, compiled_patterns: List[re.Pattern]) -> bool:
    """
    Verify if a string matches at least one compiled regex pattern.

    Args:
        name: Path or file name to evaluate.
        compiled_patterns: Pre-compiled regex objects.

    Returns:
        bool: True if any match is found, False otherwise.
    """
    return any(rx.search(name) for rx in compiled_patterns)

# -----------------------------------------------------------------------------
# PATH CLASSIFICATION
# -----------------------------------------------------------------------------

def path_segments(path: str) -> List[str]:
    """Split a path on both separator styles, dropping empty parts."""
    return [p for p in re.split(r"[\\/]+", path) if p]


def is_vendored(path: str, vendor_dirs: Iterable[str] = VENDOR_DIR_NAMES) -> bool:
    """True if any directory segment of the path is a vendored dependency tree."""
    vendor = set(vendor_dirs)
    return any(segment in vendor for segment in path_segments(path)[:-1])


def has_extension(path: str, extensions: Iterable[str]) -> bool:
    """True if the file name ends with one of the extensions and has a stem."""
    name = os.path.basename(path)
    return any(ext and name.endswith(ext) and len(name) > len(ext) for ext in extensions)


def default_should_be_indexed(
        path: str,
        *,
        root: Optional[str] = None,
        extensions: Iterable[str] = DEFAULT_EXTENSIONS,
        output_name: str = DEFAULT_OUTPUT_NAME,
) -> bool:
    """
    Default eligibility rule.

    Accepts '.js' files, except the generated 'index.js' and anything
    below a 'node_modules' directory. Given a root, vendoring is judged on
    the path below it, so a package that itself sits in node_modules can
    still index its own files.
    """
    rel = _relative_posix(path, root) if root else None
    return all([
        has_extension(path, extensions),
        os.path.basename(path) != output_name,
        not is_vendored(rel if rel is not None else path),
    ])


def build_predicate(config: IndexConfig) -> PathPredicate:
    """
    Resolve the eligibility predicate of a run.

    A predicate supplied in the configuration is used as-is. Otherwise the
    default rule runs with the configured extensions and output file name,
    followed by the exclusion regexes (matched against the forward-slash
    relative path).
    """
    if config.should_be_indexed is not None:
        return config.should_be_indexed

    root = os.path.abspath(config.directory)
    output_name = os.path.basename(config.output) or DEFAULT_OUTPUT_NAME
    extensions = list(config.extensions)
    exclude_rx = compile_patterns(config.exclude_patterns)

    def should_be_indexed(path: str) -> bool:
        if not default_should_be_indexed(
                path, root=root, extensions=extensions, output_name=output_name
        ):
            return False
        rel = _relative_posix(path, root)
        return rel is None or not matches_any(rel, exclude_rx)

    return should_be_indexed


def _relative_posix(path: str, root: str) -> Optional[str]:
    """Forward-slash path relative to root, or None for paths elsewhere."""
    try:
        rel = os.path.relpath(os.path.abspath(path), root)
    except ValueError:
        return None
    return rel.replace(os.sep, "/")
