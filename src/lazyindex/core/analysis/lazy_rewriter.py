from __future__ import annotations

"""
Lazy Binding Rewriter.

Post-processes already rendered module text, turning eager properties

    currentUsagePage: require('./currentUsage.page.js')

into accessors that defer the load until the property is read

    get currentUsagePage() { return require('./currentUsage.page.js'); }

The generator renders accessors natively; this pass exists for index files
that were written eagerly, by hand or with --eager.
"""

import logging
import re

logger = logging.getLogger(__name__)

_EAGER_BINDING_RX = re.compile(
    r"(?<![\w$.])"
    r"(?P<key>[A-Za-z_$][\w$]*|\"(?:[^\"\\\n]|\\.)*\")"
    r": require\("
    r"(?P<arg>'\.\.?/(?:[^'\\\n]|\\.)*')"
    r"\)"
)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def rewrite_lazy_bindings(text: str) -> str:
    """
    Rewrite every eager 'key: require('./path')' pair into an accessor.

    Only the exact leaf shape with a relative specifier ('./' or '../') is
    touched; the require argument is kept byte-for-byte.
    """
    return _EAGER_BINDING_RX.sub(
        lambda m: f"get {m.group('key')}() {{ return require({m.group('arg')}); }}",
        text,
    )


def count_eager_bindings(text: str) -> int:
    """Number of entries rewrite_lazy_bindings would convert."""
    return sum(1 for _ in _EAGER_BINDING_RX.finditer(text))


def rewrite_lazy_file(path: str) -> int:
    """
    Rewrite an index file in place.

    Args:
        path: Module to convert.

    Returns:
        int: Number of bindings converted. The file is left untouched
             when nothing matches.

    Raises:
        OSError: If the file cannot be read or written.
    """
    with open(path, "r", encoding="utf-8") as f:
        original = f.read()

    converted = count_eager_bindings(original)
    if not converted:
        logger.info(f"No eager bindings found in {path}")
        return 0

    with open(path, "w", encoding="utf-8") as f:
        f.write(rewrite_lazy_bindings(original))

    logger.info(f"Converted {converted} eager binding(s) in {path}")
    return converted
