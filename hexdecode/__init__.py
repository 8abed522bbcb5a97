"""Bounded hexadecimal ASCII to binary decoding."""

from hexdecode.codec import decode_hex, decode_hex_checked, decode_nibble, is_hex_digit
from hexdecode.errors import DumpError, HexDecodeError, InvalidHexError
from hexdecode.utils import hex_to_ascii, normalize_hex, unhexlify

__all__ = [
    "decode_hex",
    "decode_hex_checked",
    "decode_nibble",
    "is_hex_digit",
    "hex_to_ascii",
    "normalize_hex",
    "unhexlify",
    "DumpError",
    "HexDecodeError",
    "InvalidHexError",
]
