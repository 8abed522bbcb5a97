# -*- coding: utf-8 -*-
"""Decode case-insensitive hexadecimal ASCII into a caller-owned buffer.

The fast path (:func:`decode_nibble`, :func:`decode_hex`) assumes its input
is valid hex and performs no checks at all.  :func:`decode_hex_checked` is
the hardened variant and raises :class:`InvalidHexError` on the first
non-hex character it would consume.
"""

from __future__ import annotations

from typing import Union

from hexdecode.errors import InvalidHexError

HexInput = Union[str, bytes, bytearray, memoryview]

HEX_DIGITS = frozenset(b"0123456789abcdefABCDEF")


def _code(h) -> int:
    return ord(h) if isinstance(h, str) else h


def decode_nibble(h) -> int:
    """Return the 4-bit value of a single hex digit.

    ``h`` may be a one-character string or an integer code point.  Letters
    have bit 6 set and digits do not, so ``h >> 6`` is 1 for ``a-f``/``A-F``
    and 0 for ``0-9``.  The result for anything else is unspecified.
    """
    h = _code(h)
    return (h & 0x0F) + (h >> 6) * 9


def is_hex_digit(h) -> bool:
    return _code(h) in HEX_DIGITS


def decode_hex(text: HexInput, hlen: int, out, blen: int) -> int:
    """Decode hex pairs from ``text`` into ``out`` and return bytes written.

    :param text: hex characters to decode, assumed valid
    :param hlen: number of characters of ``text`` to consider
    :param out: writable byte buffer (``bytearray`` or ``memoryview``)
    :param blen: maximum number of bytes to write
    :return: number of bytes written, at most ``min(hlen // 2, blen)``

    A trailing odd character is ignored and truncation is silent: compare
    the return value against the expected length to detect it.
    """
    hlen = min(hlen, len(text))
    blen = min(blen, len(out))
    i = j = 0
    while i < blen and j + 1 < hlen:
        hi = decode_nibble(text[j])
        lo = decode_nibble(text[j + 1])
        out[i] = ((hi << 4) | lo) & 0xFF
        i += 1
        j += 2
    return i


def decode_hex_checked(text: HexInput, hlen: int, out, blen: int) -> int:
    """Like :func:`decode_hex` but reject non-hex characters.

    Only the characters that would actually be consumed are validated.
    Raises :class:`InvalidHexError` before writing the offending pair.
    """
    hlen = min(hlen, len(text))
    blen = min(blen, len(out))
    i = j = 0
    while i < blen and j + 1 < hlen:
        for pos in (j, j + 1):
            if not is_hex_digit(text[pos]):
                raise InvalidHexError(pos, text[pos])
        out[i] = (decode_nibble(text[j]) << 4) | decode_nibble(text[j + 1])
        i += 1
        j += 2
    return i
