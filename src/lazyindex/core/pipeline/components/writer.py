from __future__ import annotations

"""
Output Persistence.

Writes the generated module to its destination in a single attempt.
Failures are propagated to the engine, which reports them; nothing is
retried and nothing is swallowed.
"""

import logging

from lazyindex.infra.fs import ensure_parent_dir

logger = logging.getLogger(__name__)


def write_module(output_path: str, content: str) -> None:
    """
    Create or overwrite the generated module.

    Args:
        output_path: Absolute destination path.
        content: Full module text.

    Raises:
        OSError: If the destination (or its directory) is not writable.
    """
    ensure_parent_dir(output_path)
    with open(output_path, "w", encoding="utf-8", newline="\n") as f:
        f.write(content)
    logger.debug(f"Wrote {len(content)} characters to {output_path}")
