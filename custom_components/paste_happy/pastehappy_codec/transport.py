"""Carry compressed tokens inside URL query or fragment parameters."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Tuple
from urllib.parse import parse_qsl, quote, unquote, urlencode, urlsplit, urlunsplit

from .helpers.decoder import decompress
from .helpers.encoder import compress
from .registry import LINK_PLACEMENTS, LOCATION_FRAGMENT, LOCATION_QUERY, LinkPlacement

_LOGGER = logging.getLogger(__name__)

# Characters encodeURIComponent leaves unescaped besides alphanumerics.
URI_COMPONENT_SAFE = "-_.!~*'()"

Params = List[Tuple[str, str]]


def escape_component(symbols: str) -> str:
    """Percent-escape a symbol string for use as a URI component."""
    return quote(symbols, safe=URI_COMPONENT_SAFE)


def unescape_component(value: str) -> str:
    """Percent-unescape a URI component and restore ``+`` turned into spaces."""
    return unquote(value).replace(" ", "+")


def compress_to_encoded_uri_component(text: str | None) -> str:
    """Compress text into an escaped token ready for a link."""
    return escape_component(compress(text))


def decompress_from_encoded_uri_component(value: str | None) -> str:
    """Decompress an escaped token taken from a link."""
    if not value:
        return ""
    return decompress(unescape_component(value))


encode_token = compress_to_encoded_uri_component
decode_token = decompress_from_encoded_uri_component


def _parse(component: str) -> Params:
    return parse_qsl(component, keep_blank_values=True)


def _first_values(params: Params) -> Dict[str, str]:
    values: Dict[str, str] = {}
    for key, value in params:
        values.setdefault(key, value)
    return values


def _owns(params: Params, placement: LinkPlacement) -> bool:
    values = _first_values(params)
    if placement.flag_param:
        return values.get(placement.flag_param) == placement.flag_value
    return placement.token_param in values


def _without(params: Params, placement: LinkPlacement) -> Params:
    owned = placement.activation_params
    return [(key, value) for key, value in params if key not in owned]


def build_link(url: str, token: str, placement: LinkPlacement) -> str:
    """Return ``url`` carrying an escaped token at the given placement."""
    parts = urlsplit(url)
    component = parts.query if placement.location == LOCATION_QUERY else parts.fragment
    params = _without(_parse(component), placement)

    pieces = [urlencode(params)] if params else []
    if placement.flag_param:
        pieces.append(f"{placement.flag_param}={placement.flag_value}")
    # The token is already escaped; urlencode would escape it twice.
    pieces.append(f"{placement.token_param}={token}")
    joined = "&".join(pieces)

    if placement.location == LOCATION_QUERY:
        parts = parts._replace(query=joined)
    else:
        parts = parts._replace(fragment=joined)
    return urlunsplit(parts)


def extract_token(url: str) -> Optional[Tuple[str, str]]:
    """Return the placement key and token carried by ``url``, if any.

    Values are form-decoded once, so a ``+`` in the token may come back as a
    space; ``decode_token`` restores it.
    """
    parts = urlsplit(url)
    fragment = _first_values(_parse(parts.fragment))
    for placement in LINK_PLACEMENTS:
        if placement.location != LOCATION_FRAGMENT or placement.flag_param:
            continue
        if fragment.get(placement.token_param):
            return placement.key, fragment[placement.token_param]

    combined = _first_values(_parse(parts.query) + _parse(parts.fragment))
    for placement in LINK_PLACEMENTS:
        if placement.flag_param and combined.get(placement.flag_param) != placement.flag_value:
            continue
        if combined.get(placement.token_param):
            return placement.key, combined[placement.token_param]
    return None


def strip_activation_params(url: str) -> str:
    """Remove token parameters of every placement from ``url``."""
    parts = urlsplit(url)
    query = _parse(parts.query)
    fragment = _parse(parts.fragment)
    changed = False

    for placement in LINK_PLACEMENTS:
        if placement.flag_param or placement.location == LOCATION_QUERY:
            if _owns(query, placement):
                query = _without(query, placement)
                changed = True
        if placement.flag_param or placement.location == LOCATION_FRAGMENT:
            if _owns(fragment, placement):
                fragment = _without(fragment, placement)
                changed = True

    if not changed:
        return url
    _LOGGER.debug("Stripped activation parameters from %s", parts.netloc or "link")
    return urlunsplit(parts._replace(query=urlencode(query), fragment=urlencode(fragment)))
