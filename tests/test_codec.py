"""Tests for the compressor and decompressor."""

import random

import pytest

from custom_components.paste_happy.pastehappy_codec import (
    DecodeError,
    InvalidInitialMarker,
    InvalidSymbol,
    StreamExhausted,
    UnresolvedCode,
    compress,
    decompress,
)
from custom_components.paste_happy.pastehappy_codec.helpers.bitstream import (
    ALPHABET,
    BitWriter,
)

LOREM = (
    "Lorem ipsum dolor sit amet, consectetur adipiscing elit, sed do eiusmod "
    "tempor incididunt ut labore et dolore magna aliqua. Ut enim ad minim "
    "veniam, quis nostrud exercitation ullamco laboris nisi ut aliquip ex ea "
    "commodo consequat."
)

SAMPLES = [
    "A",
    "AB",
    "AAAA",
    "abababababababab",
    "hello world",
    "Hello, hello, hello!\nSee you at 7pm 🎉",
    "Grüße aus Köln – 10 € pro Person",
    "日本語のテキスト、日本語のテキスト",
    "\x00\x01\xff",
    "￿Ā",
    "a\ud800b",
    "\ude00 lone low surrogate",
    "\U0001f600\U0001f601\U0001f600",
    LOREM,
    LOREM * 5,
]

POOLS = [
    "ab",
    "abcdefghij ",
    "".join(chr(c) for c in range(32, 127)),
    "äöüßéèñ€…—“”",
    "αβγδεζηθ日本語中文한국어",
    "😀🎉👍🔥",
]


def _random_text(seed: int) -> str:
    rng = random.Random(seed)
    pool = POOLS[seed % len(POOLS)]
    return "".join(rng.choice(pool) for _ in range(rng.randint(1, 600)))


def test_empty_input():
    assert compress("") == ""
    assert compress(None) == ""
    assert decompress("") == ""
    assert decompress(None) == ""


def test_known_vectors():
    assert compress("A") == "IJA"
    assert compress("AB") == "IIISA"
    assert decompress("IJA") == "A"
    assert decompress("IIISA") == "AB"


def test_output_uses_alphabet_only():
    for text in SAMPLES:
        assert set(compress(text)) <= set(ALPHABET[:64])


@pytest.mark.parametrize("text", SAMPLES)
def test_round_trip(text):
    assert decompress(compress(text)) == text


@pytest.mark.parametrize("seed", range(30))
def test_round_trip_random(seed):
    text = _random_text(seed)
    assert decompress(compress(text)) == text


def test_self_referential_codes():
    # "AAAA" makes the decoder see code 4 before entry 4 exists.
    for length in range(1, 40):
        text = "A" * length
        assert decompress(compress(text)) == text
    text = "xyxyxyxyxyxyxyxyxyxy" * 3
    assert decompress(compress(text)) == text


def test_dictionary_reuse_shortens_output():
    assert len(compress("AAAA")) < len(compress("ABCD"))
    assert len(compress("A" * 1000)) < 100


def test_growth_boundaries():
    distinct_ascii = "".join(chr(33 + i) for i in range(90))
    distinct_wide = "".join(chr(0x400 + i) for i in range(300))
    for text in (
        distinct_ascii,
        distinct_ascii * 4,
        distinct_wide,
        distinct_wide + distinct_ascii + distinct_wide[::-1],
    ):
        assert decompress(compress(text)) == text


def test_every_prefix_round_trips():
    for end in range(1, 120):
        text = LOREM[:end]
        assert decompress(compress(text)) == text


def test_deterministic():
    assert compress(LOREM) == compress(LOREM)


def test_initial_end_marker_decodes_to_empty():
    writer = BitWriter()
    writer.write_bits(2, 2)
    writer.flush_padding()
    assert writer.getvalue() == "Q"
    assert decompress("Q") == ""


def test_invalid_initial_marker():
    with pytest.raises(InvalidInitialMarker) as excinfo:
        decompress("w")
    assert excinfo.value.marker == 3


def test_truncated_token_fails():
    token = compress(LOREM * 2)
    for cut in (1, len(token) // 3, len(token) // 2, len(token) - 3):
        with pytest.raises(StreamExhausted):
            decompress(token[:cut])


def test_unresolved_code():
    writer = BitWriter()
    writer.write_bits(0, 2)
    writer.write_bits(ord("A"), 8)
    writer.write_bits(5, 3)
    writer.flush_padding()

    with pytest.raises(UnresolvedCode) as excinfo:
        decompress(writer.getvalue())
    assert excinfo.value.code == 5
    assert excinfo.value.dict_size == 4


def test_invalid_symbol():
    with pytest.raises(InvalidSymbol):
        decompress("IJ!")
    with pytest.raises(InvalidSymbol):
        decompress("*IJA")


def test_dollar_is_rejected():
    assert decompress("IJA") == "A"
    with pytest.raises(InvalidSymbol) as excinfo:
        decompress("IJ$")
    assert excinfo.value.symbol == "$"
    assert excinfo.value.position == 2


def test_separate_surrogates_decode_as_one_character():
    text = "\ud83d\ude00"
    assert compress(text) == compress("\U0001f600")
    assert decompress(compress(text)) == "\U0001f600"


def test_decode_errors_are_value_errors():
    with pytest.raises(ValueError):
        decompress("w")
    assert issubclass(StreamExhausted, DecodeError)
    assert issubclass(UnresolvedCode, DecodeError)
    assert issubclass(InvalidSymbol, DecodeError)
