from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures that lay out small JavaScript packages on disk.
"""

import os
import sys
from pathlib import Path
from typing import Callable, Iterable, List

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Data
# -----------------------------------------------------------------------------
PAGES_LAYOUT: List[str] = [
    "search/account.page.js",
    "search/keyword.page.js",
    "search/results/account.table.js",
    "transactions.page.js",
]


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def make_files() -> Callable[[Path, Iterable[str]], Path]:
    """
    Return a helper that creates files (forward-slash relative paths)
    under a root directory and returns that root.
    """
    def _make(root: Path, rel_paths: Iterable[str]) -> Path:
        root.mkdir(parents=True, exist_ok=True)
        for rel in rel_paths:
            target = root.joinpath(*rel.split("/"))
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text("module.exports = {};\n", encoding="utf-8")
        return root

    return _make


@pytest.fixture
def pages_project(tmp_path: Path, make_files) -> Path:
    """
    Create the reference page-object package.

    Structure:
    /pages
      /search
        account.page.js
        keyword.page.js
        /results
          account.table.js
      transactions.page.js
    """
    return make_files(tmp_path / "pages", PAGES_LAYOUT)
