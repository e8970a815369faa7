"""Tests for the linker, placement registry and activity data."""

import pytest

from custom_components.paste_happy.pastehappy_codec import (
    DecodeError,
    InputTooLong,
    LinkData,
    PasteHappyLinker,
    StreamExhausted,
    get_placement,
    placement_keys,
)


def test_placement_registry():
    assert placement_keys() == ("fragment", "query")
    assert get_placement("query").activation_params == ("ph", "ph_post", "ph_visit")
    assert get_placement("fragment").activation_params == ("pastePost",)
    assert get_placement("unknown").key == "fragment"
    assert get_placement(None).key == "fragment"


def test_compression_ratio():
    assert LinkData().compression_ratio is None
    assert LinkData(source_length=0, token_length=3).compression_ratio is None
    assert LinkData(source_length=8, token_length=2).compression_ratio == 25.0


def test_encode_decode_records_activity():
    linker = PasteHappyLinker()
    activity = []
    linker.add_activity_callback(activity.append)

    token = linker.encode("A")
    assert token == "IJA"
    assert linker.data.last_result == "encoded"
    assert linker.data.source_length == 1
    assert linker.data.token_length == 3
    assert linker.data.last_update is not None

    assert linker.decode(token) == "A"
    assert linker.data.last_result == "decoded"
    assert activity == ["encoded", "decoded"]


def test_encode_enforces_max_length():
    linker = PasteHappyLinker(max_length=5)
    linker.encode("12345")
    with pytest.raises(InputTooLong) as excinfo:
        linker.encode("123456")
    assert excinfo.value.limit == 5
    assert excinfo.value.length == 6


def test_max_length_counts_utf16_code_units():
    linker = PasteHappyLinker(max_length=4)
    linker.encode("\U0001f600\U0001f600")
    assert linker.data.source_length == 4
    with pytest.raises(InputTooLong) as excinfo:
        linker.encode("\U0001f600\U0001f600\U0001f600")
    assert excinfo.value.length == 6


def test_configure_can_remove_limit():
    linker = PasteHappyLinker(max_length=3)
    linker.configure(max_length=None)
    assert linker.max_length is None
    assert linker.decode(linker.encode("x" * 10)) == "x" * 10


def test_encode_without_limit():
    linker = PasteHappyLinker(max_length=None)
    text = "x" * 20000
    assert linker.decode(linker.encode(text)) == text


def test_decode_failure_is_recorded_and_raised():
    linker = PasteHappyLinker()
    activity = []
    linker.add_activity_callback(activity.append)

    with pytest.raises(StreamExhausted):
        linker.decode("IJ")
    assert linker.data.last_result == "decode_failed"
    assert linker.data.last_error
    assert linker.data.source_length is None
    assert activity == ["decode_failed"]

    with pytest.raises(DecodeError):
        linker.decode("w")


def test_state_callbacks_and_unsubscribe():
    linker = PasteHappyLinker()
    calls = []
    unsubscribe = linker.register_callback(lambda: calls.append(True))

    linker.encode("hello")
    assert len(calls) == 1
    unsubscribe()
    linker.encode("hello")
    assert len(calls) == 1
    unsubscribe()


def test_remove_activity_callback():
    linker = PasteHappyLinker()
    activity = []
    linker.add_activity_callback(activity.append)
    linker.remove_activity_callback(activity.append)
    linker.encode("hello")
    assert activity == []


def test_build_and_read_link():
    linker = PasteHappyLinker(placement="query")
    text = "Big sale this weekend!\nDM me + see photos ($5 off)"

    link = linker.build_link("https://example.com/groups/cats", text)
    assert link.startswith("https://example.com/groups/cats?ph=1&ph_post=")
    assert linker.read_link(link) == text

    link = linker.build_link("https://example.com/groups/cats", text, placement="fragment")
    assert "#pastePost=" in link
    assert linker.read_link(link) == text


def test_read_link_without_token():
    assert PasteHappyLinker().read_link("https://example.com/groups/cats") is None


def test_configure():
    linker = PasteHappyLinker()
    calls = []
    linker.register_callback(lambda: calls.append(True))

    linker.configure(placement="query", max_length=10)
    assert linker.placement.key == "query"
    assert linker.max_length == 10
    assert calls == [True]

    linker.configure()
    assert linker.placement.key == "query"
    assert linker.max_length == 10
