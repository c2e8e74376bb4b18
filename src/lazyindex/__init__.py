"""
lazyindex: generate a lazily-loading index.js for a directory of modules.

Public API:
- run_indexer(config: IndexConfig | dict | None = None, *, dry_run: bool = False) -> IndexResult
- generate_index(config: dict | None = None, **overrides) -> IndexResult
- get_default_config() -> IndexConfig

Every qualifying file becomes a getter that requires it on first access,
nested in namespaces that mirror the directory layout.
"""
from lazyindex.core.pipeline.engine import generate_index, run_indexer
from lazyindex.domain.config import IndexConfig, get_default_config
from lazyindex.domain.index_models import IndexResult

__all__ = [
    "IndexConfig",
    "IndexResult",
    "generate_index",
    "get_default_config",
    "run_indexer",
]
