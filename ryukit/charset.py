"""Conversion of byte strings between character encodings."""

from __future__ import annotations

import codecs


def change_charset(src_charset: str, dst_charset: str, data: bytes) -> bytes:
    """Re-encode ``data`` from ``src_charset`` to ``dst_charset``.

    Raises ``LookupError`` for an unknown charset and ``UnicodeError`` when the
    data cannot be decoded or represented in the target charset.
    """
    codecs.lookup(src_charset)
    codecs.lookup(dst_charset)
    return bytes(data).decode(src_charset).encode(dst_charset)