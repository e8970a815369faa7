"""Paste Happy link codec library."""

from __future__ import annotations

from .base import DEFAULT_MAX_LENGTH, PasteHappyLinker
from .exceptions import (
    DecodeError,
    InputTooLong,
    InvalidInitialMarker,
    InvalidSymbol,
    PasteHappyCodecError,
    StreamExhausted,
    UnresolvedCode,
)
from .helpers.decoder import decompress
from .helpers.encoder import compress
from .models import LinkData
from .registry import DEFAULT_PLACEMENT, LinkPlacement, get_placement, placement_keys
from .transport import (
    build_link,
    compress_to_encoded_uri_component,
    decode_token,
    decompress_from_encoded_uri_component,
    encode_token,
    extract_token,
    strip_activation_params,
)

__all__ = [
    "DEFAULT_MAX_LENGTH",
    "DEFAULT_PLACEMENT",
    "DecodeError",
    "InputTooLong",
    "InvalidInitialMarker",
    "InvalidSymbol",
    "LinkData",
    "LinkPlacement",
    "PasteHappyCodecError",
    "PasteHappyLinker",
    "StreamExhausted",
    "UnresolvedCode",
    "build_link",
    "compress",
    "compress_to_encoded_uri_component",
    "decode_token",
    "decompress",
    "decompress_from_encoded_uri_component",
    "encode_token",
    "extract_token",
    "get_placement",
    "placement_keys",
    "strip_activation_params",
]
