from __future__ import annotations

"""
Domain Constants.

Centralizes the naming conventions and default values shared by the
indexing core, the configuration layer and the CLI.
"""

from typing import List

APP_NAME = "lazyindex"

DEFAULT_OUTPUT_NAME = "index.js"
DEFAULT_CONFLICT_SUFFIX = "Js"
DEFAULT_EXTENSIONS: List[str] = [".js"]

# Directory segments that hold third-party code and are never indexed
VENDOR_DIR_NAMES: List[str] = ["node_modules"]

DEFAULT_HEADER = "\n".join([
    f"This file is auto-generated by `{APP_NAME}`.",
    "Do not edit it by hand: re-run the generator instead.",
])

HEADER_WRAP_WIDTH = 78
INDENT_WIDTH = 4
