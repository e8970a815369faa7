"""Registry of supported token placements inside a link."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

LOCATION_QUERY = "query"
LOCATION_FRAGMENT = "fragment"


@dataclass(frozen=True)
class LinkPlacement:
    """Definition of where a token travels inside a URL."""

    key: str
    label: str
    location: str
    token_param: str
    flag_param: Optional[str] = None
    flag_value: str = "1"
    extra_params: Tuple[str, ...] = ()

    @property
    def activation_params(self) -> Tuple[str, ...]:
        """Return every parameter this placement owns."""
        params = [self.token_param, *self.extra_params]
        if self.flag_param:
            params.insert(0, self.flag_param)
        return tuple(params)


LINK_PLACEMENTS: Tuple[LinkPlacement, ...] = (
    LinkPlacement(
        key="fragment",
        label="Fragment parameter",
        location=LOCATION_FRAGMENT,
        token_param="pastePost",
    ),
    LinkPlacement(
        key="query",
        label="Query parameter",
        location=LOCATION_QUERY,
        token_param="ph_post",
        flag_param="ph",
        extra_params=("ph_visit",),
    ),
)

DEFAULT_PLACEMENT = LINK_PLACEMENTS[0].key


def get_placement(key: str | None) -> LinkPlacement:
    """Get the placement definition by key."""
    for placement in LINK_PLACEMENTS:
        if placement.key == key:
            return placement
    return LINK_PLACEMENTS[0]


def placement_keys() -> Tuple[str, ...]:
    """Return the keys of all supported placements."""
    return tuple(placement.key for placement in LINK_PLACEMENTS)
