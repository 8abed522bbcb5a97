"""Exceptions raised by the checked decoders and the dump reader."""


class HexDecodeError(Exception):
    """Base class for errors raised by :mod:`hexdecode`."""


class InvalidHexError(HexDecodeError, ValueError):
    """A character outside ``0-9a-fA-F`` was found while decoding."""

    def __init__(self, position: int, char) -> None:
        self.position = position
        self.char = chr(char) if isinstance(char, int) else char
        super().__init__(f"Invalid hex character {self.char!r} at position {position}")


class DumpError(HexDecodeError):
    """A block dump is malformed."""
