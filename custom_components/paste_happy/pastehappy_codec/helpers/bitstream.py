"""Alphabet, bit cursors and growth schedule shared by both codec directions."""

from __future__ import annotations

from typing import Dict, List

from ..exceptions import InvalidSymbol, StreamExhausted

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+-$"
SYMBOL_BITS = 6

LITERAL_8 = 0
LITERAL_16 = 1
END_OF_STREAM = 2
FIRST_CODE = 3

# A 6-bit symbol never reaches the trailing "$", so it is not a valid symbol.
SYMBOL_COUNT = 1 << SYMBOL_BITS
SYMBOL_INDEX: Dict[str, int] = {
    char: index for index, char in enumerate(ALPHABET[:SYMBOL_COUNT])
}

assert len(ALPHABET) == SYMBOL_COUNT + 1
assert len(SYMBOL_INDEX) == SYMBOL_COUNT


def symbol_index(char: str, position: int | None = None) -> int:
    """Return the 6-bit value of an alphabet character."""
    try:
        return SYMBOL_INDEX[char]
    except KeyError:
        raise InvalidSymbol(char, position) from None


def symbol_char(index: int) -> str:
    """Return the alphabet character for a 6-bit value."""
    return ALPHABET[index]


def split_code_units(text: str) -> str:
    """Return text as a string of UTF-16 code units, one character each."""
    raw = text.encode("utf-16-le", "surrogatepass")
    return "".join(
        chr(int.from_bytes(raw[i : i + 2], "little")) for i in range(0, len(raw), 2)
    )


def join_code_units(units: List[str]) -> str:
    """Join UTF-16 code units back into text, pairing surrogates.

    A high surrogate followed by a low surrogate always becomes one astral
    character, even if the source held them as two separate code points.
    """
    raw = "".join(units).encode("utf-16-le", "surrogatepass")
    return raw.decode("utf-16-le", "surrogatepass")


class GrowthSchedule:
    """Track the current code width and insertions left before it grows."""

    def __init__(self, num_bits: int, enlarge_in: int) -> None:
        self.num_bits = num_bits
        self.enlarge_in = enlarge_in

    def tick(self) -> None:
        """Account for one dictionary insertion."""
        self.enlarge_in -= 1
        if self.enlarge_in == 0:
            self.enlarge_in = 1 << self.num_bits
            self.num_bits += 1


class BitWriter:
    """Pack values LSB first into big-endian 6-bit alphabet symbols."""

    def __init__(self) -> None:
        self._buffer = 0
        self._bit_count = 0
        self._output: List[str] = []

    def write_bits(self, value: int, bit_count: int) -> None:
        """Append the low ``bit_count`` bits of ``value``."""
        for i in range(bit_count):
            self._buffer = (self._buffer << 1) | ((value >> i) & 1)
            self._bit_count += 1
            if self._bit_count == SYMBOL_BITS:
                self._emit()

    def flush_padding(self) -> None:
        """Shift in zero bits until a fresh symbol completes."""
        while True:
            self._buffer <<= 1
            self._bit_count += 1
            if self._bit_count == SYMBOL_BITS:
                self._emit()
                return

    def getvalue(self) -> str:
        return "".join(self._output)

    def _emit(self) -> None:
        self._output.append(symbol_char(self._buffer))
        self._buffer = 0
        self._bit_count = 0


class BitReader:
    """Read single bits, most significant first, from alphabet symbols."""

    def __init__(self, symbols: str) -> None:
        self._symbols = symbols
        self._value = 0
        self._mask = 0
        self._index = 0

    @property
    def exhausted(self) -> bool:
        return self._mask == 0 and self._index >= len(self._symbols)

    def read_bit(self) -> int:
        """Return the next bit, loading the next symbol when needed."""
        if self._mask == 0:
            if self._index >= len(self._symbols):
                raise StreamExhausted(self._index)
            self._value = symbol_index(self._symbols[self._index], self._index)
            self._index += 1
            self._mask = 1 << (SYMBOL_BITS - 1)
        bit = 1 if self._value & self._mask else 0
        self._mask >>= 1
        return bit

    def read_bits(self, bit_count: int) -> int:
        """Read ``bit_count`` bits and assemble them LSB first."""
        value = 0
        for i in range(bit_count):
            value |= self.read_bit() << i
        return value
