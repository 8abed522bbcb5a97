#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""Convert hex text or JSON block dumps to binary files.

Text mode reads a file such as ``"af 00 44 33 22 11"`` (whitespace, ``0x``
prefixes and ``:``/``-`` separators are ignored) and writes the decoded
bytes.  With ``--dump`` the input is a JSON block dump
(``{"uid": ..., "blocks": [{"index": 0, "data": "..."}]}``) and the output is
its raw memory image.

Exit codes: 0 on success, 1 on decoding errors, 2 when the input is missing.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from hexdecode.codec import decode_hex, decode_hex_checked
from hexdecode.config import Settings
from hexdecode.dump import read_dump
from hexdecode.errors import HexDecodeError
from hexdecode.utils import normalize_hex

logger = logging.getLogger("hex2bin")


def _capacity(value: str) -> int:
    n = int(value)
    if n < 0:
        raise argparse.ArgumentTypeError("capacity must be >= 0")
    return n


def convert_text(src: Path, dst: Path, capacity: Optional[int], strict: bool) -> int:
    """Decode the hex text in *src* into *dst* and return the bytes written."""
    h = normalize_hex(src.read_text(encoding="utf-8"))
    expected = len(h) // 2
    buf = bytearray(expected if capacity is None else capacity)
    decoder = decode_hex_checked if strict else decode_hex

    n = decoder(h, len(h), buf, len(buf))
    if n < expected:
        logger.warning("Output troncato: %d di %d byte (capacity=%d)", n, expected, len(buf))
    if len(h) % 2:
        logger.warning("Numero dispari di cifre hex: ultima cifra %r ignorata", h[-1])

    dst.write_bytes(bytes(buf[:n]))
    return n


def convert_dump(src: Path, dst: Path, strict: bool) -> int:
    dump = read_dump(src, strict=strict)
    logger.info("UID: %s | Blocchi: %d", dump.uid_hex or "n/a", len(dump.blocks))
    dst.write_bytes(dump.image)
    return len(dump.image)


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="hex2bin", description=__doc__.splitlines()[0])
    ap.add_argument("input", help="File di testo hex (o dump JSON con --dump)")
    ap.add_argument("output", help="File binario da scrivere")
    ap.add_argument(
        "--dump",
        action="store_true",
        help="L'input è un dump JSON a blocchi",
    )
    ap.add_argument(
        "--strict",
        action="store_true",
        default=settings.strict,
        help="Rifiuta caratteri non hex (default da HEX2BIN_STRICT)",
    )
    ap.add_argument(
        "--capacity",
        type=_capacity,
        default=None,
        help="Numero massimo di byte da scrivere (solo modalità testo)",
    )
    ap.add_argument("--debug", action="store_true", help="Abilita messaggi di debug")
    return ap


def _log_level(name: str) -> int:
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def main(argv: Optional[List[str]] = None) -> int:
    settings = Settings.from_env()
    args = build_parser(settings).parse_args(argv)

    level = logging.DEBUG if args.debug else _log_level(settings.log_level)
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")
    # basicConfig non fa nulla se il root logger ha già degli handler
    for name in ("hex2bin", "hexdecode"):
        logging.getLogger(name).setLevel(level)

    src = Path(args.input)
    dst = Path(args.output)
    if not src.exists():
        logger.error("Input non trovato: %s", src)
        return 2

    try:
        if args.dump:
            n = convert_dump(src, dst, args.strict)
        else:
            n = convert_text(src, dst, args.capacity, args.strict)
    except (HexDecodeError, OSError, UnicodeDecodeError) as e:
        logger.error("Conversione fallita: %s", e)
        return 1

    logger.info("Scritti %d byte in %s", n, dst)
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\n[INFO] Interrotto dall'utente.")
        sys.exit(130)
