from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed argparse
namespace into configuration overrides understood by the validator.
"""

import argparse
from typing import Any, Dict, List, Optional

from lazyindex.domain.constants import APP_NAME, DEFAULT_CONFLICT_SUFFIX

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the lazyindex CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog=APP_NAME,
        description=(
            "Generate an index.js that exposes every module of a directory tree "
            "as a lazily required, nested named export."
        ),
    )

    # --- Paths ---
    p.add_argument(
        "-d", "--directory",
        dest="directory",
        default=None,
        help="Directory to scan (default: current directory).",
    )
    p.add_argument(
        "-o", "--output",
        dest="output",
        default=None,
        help="Generated module path (default: index.js inside the scanned directory).",
    )
    p.add_argument(
        "-c", "--config",
        dest="config_file",
        default=None,
        help="JSON file with configuration values; CLI flags take precedence.",
    )

    # --- Content ---
    p.add_argument(
        "--header",
        dest="header",
        default=None,
        help="Text of the generated file's doc comment.",
    )
    p.add_argument(
        "--conflict-suffix",
        dest="append_to_conflicts",
        default=None,
        help=f"Suffix for files that share a name with a directory (default: {DEFAULT_CONFLICT_SUFFIX}).",
    )
    p.add_argument(
        "--ext",
        dest="extensions",
        default=None,
        help="Comma-separated extensions to index (default: .js).",
    )
    p.add_argument(
        "--exclude",
        dest="exclude_patterns",
        default=None,
        help="Comma-separated regexes matched against relative paths to skip.",
    )
    p.add_argument(
        "--eager",
        action="store_true",
        help="Emit plain require() properties instead of lazy getters.",
    )

    # --- Modes ---
    p.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the generated module to stdout instead of writing it.",
    )
    p.add_argument(
        "--lazify",
        dest="lazify_path",
        default=None,
        metavar="FILE",
        help="Rewrite the eager require() properties of an existing index file into getters, then exit.",
    )

    # --- Diagnostics ---
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the run result as JSON.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write logs to this rotating file.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Options the user did not pass are omitted so they cannot mask values
    coming from a config file.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    for key in ("directory", "output", "header", "append_to_conflicts"):
        value = getattr(args, key)
        if value is not None:
            overrides[key] = value

    if args.extensions:
        overrides["extensions"] = _split_csv(args.extensions)
    if args.exclude_patterns:
        overrides["exclude_patterns"] = _split_csv(args.exclude_patterns)
    if args.eager:
        overrides["lazy"] = False

    return overrides

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _split_csv(value: Optional[str]) -> Optional[List[str]]:
    """
    Convert a comma-separated string into a list of sanitized strings.
    """
    if value is None:
        return None
    parts = [x.strip() for x in value.split(",")]
    return [x for x in parts if x]
