# -*- coding: utf-8 -*-
"""Assemble raw memory images from JSON block dumps.

A dump has the shape written by the PN532/nfcpy dump tools::

    {"uid": "C59B3706", "blocks": [{"index": 0, "data": "<32 hex chars>"}, ...]}

Each block is decoded straight into its 16-byte slot of the image with
:func:`hexdecode.codec.decode_hex`; the slot size is the output capacity, so
over-long block data is truncated and short data leaves trailing zeros.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Union

from hexdecode.codec import decode_hex, decode_hex_checked
from hexdecode.errors import DumpError
from hexdecode.utils import normalize_hex, unhexlify

logger = logging.getLogger(__name__)

BYTES_PER_BLOCK = 16


@dataclass
class TagDump:
    """Decoded contents of a block dump."""

    uid: bytes
    blocks: Dict[int, bytes] = field(default_factory=dict)
    image: bytes = b""

    @property
    def uid_hex(self) -> str:
        return self.uid.hex().upper()


def load_dump(path: Union[str, Path]) -> Dict[str, Any]:
    """Read a JSON dump from *path*.

    Raises ``DumpError`` when the file is not valid JSON.
    """
    try:
        with open(path, encoding="utf-8") as fh:
            return json.load(fh)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise DumpError(f"Dump JSON non valido in {path}: {exc}") from exc


def _block_entries(obj: Dict[str, Any]) -> List[Dict[str, Any]]:
    blocks = obj.get("blocks") if isinstance(obj, dict) else None
    if not isinstance(blocks, list):
        raise DumpError("Dump senza lista 'blocks'")
    for blk in blocks:
        if not isinstance(blk, dict) or "index" not in blk or "data" not in blk:
            raise DumpError(f"Blocco malformato: {blk!r}")
        try:
            idx = int(blk["index"])
        except (TypeError, ValueError) as exc:
            raise DumpError(f"Indice di blocco non numerico: {blk['index']!r}") from exc
        if idx < 0:
            raise DumpError(f"Indice di blocco negativo: {blk['index']}")
    return blocks


def parse_dump(obj: Dict[str, Any], strict: bool = False) -> TagDump:
    """Decode every block of *obj* into a contiguous memory image.

    Blocks missing from the dump are zero filled.  When the dump has no
    ``uid`` field the first four bytes of block 0 are used, as on MIFARE
    Classic tags.
    """
    entries = _block_entries(obj)
    decoder = decode_hex_checked if strict else decode_hex

    count = max((int(b["index"]) for b in entries), default=-1) + 1
    image = bytearray(count * BYTES_PER_BLOCK)
    view = memoryview(image)
    by_idx: Dict[int, bytes] = {}

    for blk in entries:
        idx = int(blk["index"])
        h = normalize_hex(str(blk["data"]))
        start = idx * BYTES_PER_BLOCK
        slot = view[start:start + BYTES_PER_BLOCK]
        # un indice ripetuto sovrascrive il blocco precedente per intero
        slot[:] = bytes(BYTES_PER_BLOCK)
        n = decoder(h, len(h), slot, BYTES_PER_BLOCK)
        if n < BYTES_PER_BLOCK:
            logger.warning("Blocco %d corto: %d/%d byte", idx, n, BYTES_PER_BLOCK)
        elif len(h) > 2 * BYTES_PER_BLOCK:
            logger.warning("Blocco %d troncato a %d byte", idx, BYTES_PER_BLOCK)
        by_idx[idx] = bytes(slot)

    uid_field = obj.get("uid")
    if uid_field:
        uid = unhexlify(str(uid_field), strict=strict)
    elif 0 in by_idx:
        uid = by_idx[0][:4]
    else:
        uid = b""

    dump = TagDump(uid=uid, blocks=by_idx, image=bytes(image))
    logger.debug("Dump UID=%s: %d blocchi, %d byte", dump.uid_hex or "n/a", len(by_idx), len(image))
    return dump


def read_dump(path: Union[str, Path], strict: bool = False) -> TagDump:
    return parse_dump(load_dump(path), strict=strict)
