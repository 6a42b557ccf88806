"""Byte decoding for the bytes entry point of PatchSet.

The parser itself only ever sees text. Bytes are decoded here first,
using a codec chosen by label when the PatchSet is created.
"""
from __future__ import annotations

import codecs
import logging

logger = logging.getLogger(__name__)

DEFAULT_ENCODING = "utf-8"


def canonical_encoding(label: str) -> str:
    """Return the canonical codec name for ``label``.

    Raises
    ------
    LookupError
        If Python knows no codec by that name.
    """
    return codecs.lookup(label).name


def lookup_encoding(label: str) -> str:
    """Like canonical_encoding, but unknown labels fall back to UTF-8."""
    try:
        return canonical_encoding(label)
    except LookupError:
        logger.warning("Unknown encoding %r, falling back to %s", label, DEFAULT_ENCODING)
        return DEFAULT_ENCODING


def decode(data: bytes, encoding: str = DEFAULT_ENCODING) -> str:
    """Decode diff bytes, replacing malformed sequences with U+FFFD."""
    return data.decode(encoding, errors="replace")
