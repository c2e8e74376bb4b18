from __future__ import annotations

"""
Identifier Derivation.

Converts directory names and file stems into camel-case export keys.
'keyword.table' becomes 'keywordTable', 'XMLHttp-client' becomes
'xmlHttpClient'. Any Unicode letter counts as a word character, so
'über-cool' becomes 'überCool' and '日本' is kept as is.
"""

import os
import re
import unicodedata
from typing import Iterable, List

# Runs over the character-class mask of a segment (U upper, L lower or
# caseless letter, D digit): acronym runs that precede a capitalized word,
# plain words, leftover upper-case runs and digit runs. Anything else
# separates words.
_WORD_RX = re.compile(r"U+(?=UL)|U?L+|U+|D+")


def _char_class(char: str) -> str:
    if char.isdigit():
        return "D"
    if char.isupper():
        return "U"
    if char.isalpha() or unicodedata.category(char).startswith("M"):
        return "L"
    return " "

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def split_words(segment: str) -> List[str]:
    """Split a path segment into its case and punctuation delimited words."""
    segment = segment or ""
    mask = "".join(_char_class(c) for c in segment)
    return [segment[m.start():m.end()] for m in _WORD_RX.finditer(mask)]


def derive_identifier(segment: str) -> str:
    """
    Derive the camel-case identifier of a path segment.

    The first word is lower-cased, every following word is capitalized.
    Never raises; a segment without word characters yields ''.

    Args:
        segment: Directory name or file name with its extension stripped.

    Returns:
        str: The derived identifier.
    """
    words = split_words(segment)
    if not words:
        return ""
    head, tail = words[0], words[1:]
    return head.lower() + "".join(w[:1].upper() + w[1:].lower() for w in tail)


def strip_extension(filename: str, extensions: Iterable[str] = ()) -> str:
    """
    Remove the indexed extension from a file name.

    The longest matching entry of 'extensions' wins, so '.d.ts' is preferred
    over '.ts'. Without a match the last suffix is dropped.
    """
    for ext in sorted((e for e in extensions if e), key=len, reverse=True):
        if filename.endswith(ext) and len(filename) > len(ext):
            return filename[: -len(ext)]
    stem, _ = os.path.splitext(filename)
    return stem
