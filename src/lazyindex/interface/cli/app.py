from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, resolution of the
configuration hierarchy (defaults, JSON config file, CLI flags), execution
of the indexing run and rendering of its result.
"""

import json
import os
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from lazyindex.core.analysis.lazy_rewriter import rewrite_lazy_file
from lazyindex.core.pipeline.engine import run_indexer
from lazyindex.core.pipeline.stages.validator import validate_config
from lazyindex.domain.config import config_to_dict, load_config
from lazyindex.domain.errors import ConfigError
from lazyindex.domain.index_models import IndexResult
from lazyindex.infra.logging import LoggingConfig, configure_logging, get_logger
from lazyindex.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 1 failed run, 2 invalid input,
             130 interrupted).
    """
    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap (console on stderr, optional file)
    configure_logging(LoggingConfig.for_cli(debug=args.debug, log_file=args.log_file))

    # Standalone conversion mode
    if args.lazify_path:
        return _run_lazify(args.lazify_path)

    # 3. Resolve configuration hierarchy
    raw_conf: Dict[str, Any] = {}
    if args.config_file:
        try:
            raw_conf.update(load_config(args.config_file))
        except ConfigError as e:
            logger.error(str(e))
            print(f"ERROR: {e}", file=sys.stderr)
            return 2

    raw_conf.update(cli_args.args_to_overrides(args))

    cfg, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    # 4. Pre-flight input verification
    if not os.path.isdir(cfg.directory):
        msg = f"Directory does not exist: {cfg.directory}"
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 2

    # 5. Execution phase
    logger.debug(f"Effective configuration: {config_to_dict(cfg)}")
    try:
        result = run_indexer(cfg, dry_run=bool(args.dry_run))
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        print("Interrupted.", file=sys.stderr)
        return 130
    except Exception as e:
        logger.critical(f"Indexing failed unexpectedly: {e}", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    # 6. Output rendering phase
    if args.json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    elif args.dry_run and result.ok:
        sys.stdout.write(result.content)
    else:
        _print_human_summary(result)

    return 0 if result.ok else 1

# -----------------------------------------------------------------------------
# MODES
# -----------------------------------------------------------------------------

def _run_lazify(path: str) -> int:
    """Convert an existing eager index file in place."""
    if not os.path.isfile(path):
        msg = f"File does not exist: {path}"
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 2
    try:
        converted = rewrite_lazy_file(path)
    except OSError as e:
        logger.error(f"Failed to rewrite '{path}': {e}")
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    print(f"Converted {converted} binding(s) in {path}")
    return 0

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_summary(result: IndexResult) -> None:
    """
    Print the run result to the terminal.

    Args:
        result: The indexing result to render.
    """
    if not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)
        return

    print(f"Output file generated in {result.output_path}")
    print(f"Files indexed: {len(result.indexed_files)}")
    print(f"Files skipped: {result.skipped_files}")

    if result.relocated_keys:
        print("Renamed to avoid directory conflicts:")
        for key_path in result.relocated_keys:
            print(f"  - {key_path}")

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
