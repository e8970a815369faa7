"""LZString-compatible compressor producing URI-safe alphabet symbols."""

from __future__ import annotations

from typing import Dict, Set

from .bitstream import (
    END_OF_STREAM,
    FIRST_CODE,
    LITERAL_16,
    LITERAL_8,
    BitWriter,
    GrowthSchedule,
    split_code_units,
)


def _write_token(
    w: str,
    dictionary: Dict[str, int],
    pending: Set[str],
    writer: BitWriter,
    schedule: GrowthSchedule,
) -> None:
    if w in pending:
        # First occurrence of a single character: send it as a literal.
        pending.discard(w)
        value = ord(w)
        if value < 256:
            writer.write_bits(LITERAL_8, schedule.num_bits)
            writer.write_bits(value, 8)
        else:
            writer.write_bits(LITERAL_16, schedule.num_bits)
            writer.write_bits(value, 16)
        schedule.tick()
    else:
        writer.write_bits(dictionary[w], schedule.num_bits)
    schedule.tick()


def compress(text: str | None) -> str:
    """Compress text into a string of alphabet symbols."""
    if not text:
        return ""

    dictionary: Dict[str, int] = {}
    pending: Set[str] = set()
    writer = BitWriter()
    schedule = GrowthSchedule(num_bits=2, enlarge_in=2)
    w = ""

    for c in split_code_units(text):
        if c not in dictionary:
            dictionary[c] = FIRST_CODE + len(dictionary)
            pending.add(c)

        wc = w + c
        if wc in dictionary:
            w = wc
            continue

        _write_token(w, dictionary, pending, writer, schedule)
        dictionary[wc] = FIRST_CODE + len(dictionary)
        w = c

    if w:
        _write_token(w, dictionary, pending, writer, schedule)

    writer.write_bits(END_OF_STREAM, schedule.num_bits)
    writer.flush_padding()
    return writer.getvalue()
