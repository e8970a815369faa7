"""Errors raised by the Paste Happy codec."""

from __future__ import annotations


class PasteHappyCodecError(Exception):
    """Base class for codec errors."""


class DecodeError(PasteHappyCodecError, ValueError):
    """Raised when a token cannot be decoded."""


class StreamExhausted(DecodeError):
    """Raised when the token ends before the end-of-stream marker."""

    def __init__(self, symbols_read: int) -> None:
        super().__init__(
            f"Token ended after {symbols_read} symbols without an end-of-stream marker"
        )
        self.symbols_read = symbols_read


class UnresolvedCode(DecodeError):
    """Raised when a code refers to a dictionary entry that does not exist yet."""

    def __init__(self, code: int, dict_size: int) -> None:
        super().__init__(f"Code {code} is undefined (dictionary size {dict_size})")
        self.code = code
        self.dict_size = dict_size


class InvalidInitialMarker(DecodeError):
    """Raised when the leading marker is not a literal or end marker."""

    def __init__(self, marker: int) -> None:
        super().__init__(f"Invalid initial marker {marker}")
        self.marker = marker


class InvalidSymbol(DecodeError):
    """Raised when a token contains a character outside the alphabet."""

    def __init__(self, symbol: str, position: int | None = None) -> None:
        where = f" at position {position}" if position is not None else ""
        super().__init__(f"Invalid symbol {symbol!r}{where}")
        self.symbol = symbol
        self.position = position


class InputTooLong(PasteHappyCodecError, ValueError):
    """Raised when text exceeds the configured encode limit."""

    def __init__(self, length: int, limit: int) -> None:
        super().__init__(f"Input of {length} characters exceeds the limit of {limit}")
        self.length = length
        self.limit = limit
