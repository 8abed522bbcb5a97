# Utility functions per il testo esadecimale

import logging
import re
from typing import Optional

from hexdecode.codec import decode_hex, decode_hex_checked
from hexdecode.errors import InvalidHexError

logger = logging.getLogger(__name__)

_SEPARATORS = re.compile(r"[:\-]")


def normalize_hex(text: str) -> str:
    """Strip whitespace, ``0x`` prefixes and ``:``/``-`` separators."""
    parts = []
    for token in text.split():
        if token[:2].lower() == "0x":
            token = token[2:]
        parts.append(_SEPARATORS.sub("", token))
    return "".join(parts)


def unhexlify(text: str, strict: bool = False) -> bytes:
    h = normalize_hex(text)
    buf = bytearray(len(h) // 2)
    decoder = decode_hex_checked if strict else decode_hex
    n = decoder(h, len(h), buf, len(buf))
    if len(h) % 2:
        logger.debug("Ignoro la cifra finale dispari %r", h[-1])
    return bytes(buf[:n])


def hex_to_ascii(hex_str: str, strict: bool = False) -> Optional[str]:
    try:
        return unhexlify(hex_str, strict=strict).decode("utf-8", errors="ignore")
    except InvalidHexError:
        return None
