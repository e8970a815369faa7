"""LZString-compatible decompressor for alphabet symbol strings."""

from __future__ import annotations

from typing import List

from ..exceptions import InvalidInitialMarker, UnresolvedCode
from .bitstream import (
    END_OF_STREAM,
    LITERAL_16,
    LITERAL_8,
    BitReader,
    GrowthSchedule,
    join_code_units,
)

LITERAL_WIDTHS = {LITERAL_8: 8, LITERAL_16: 16}


def decompress(symbols: str | None) -> str:
    """Decompress a string of alphabet symbols.

    Raises a ``DecodeError`` subclass when the token is truncated or corrupt,
    so an empty result always means the source text was empty.
    """
    if not symbols:
        return ""

    reader = BitReader(symbols)
    marker = reader.read_bits(2)
    if marker == END_OF_STREAM:
        return ""
    if marker not in LITERAL_WIDTHS:
        raise InvalidInitialMarker(marker)

    first = chr(reader.read_bits(LITERAL_WIDTHS[marker]))
    # Codes 0-2 are reserved markers and never looked up.
    dictionary: List[str] = ["", "", "", first]
    schedule = GrowthSchedule(num_bits=3, enlarge_in=4)
    w = first
    result = [first]

    while True:
        code = reader.read_bits(schedule.num_bits)
        if code == END_OF_STREAM:
            return join_code_units(result)

        if code in LITERAL_WIDTHS:
            dictionary.append(chr(reader.read_bits(LITERAL_WIDTHS[code])))
            code = len(dictionary) - 1
            schedule.tick()

        if code < len(dictionary):
            entry = dictionary[code]
        elif code == len(dictionary):
            # The entry being defined by this very token.
            entry = w + w[0]
        else:
            raise UnresolvedCode(code, len(dictionary))

        result.append(entry)
        dictionary.append(w + entry[0])
        schedule.tick()
        w = entry
