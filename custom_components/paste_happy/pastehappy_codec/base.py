"""Linker that encodes post text into links and reads it back."""

from __future__ import annotations

import logging
import time
from typing import Callable, Optional, Set, Union

from .exceptions import DecodeError, InputTooLong
from .helpers.bitstream import split_code_units
from .models import RESULT_DECODED, RESULT_ENCODED, RESULT_FAILED, LinkData
from .registry import DEFAULT_PLACEMENT, LinkPlacement, get_placement
from .transport import build_link, decode_token, encode_token, extract_token

_LOGGER = logging.getLogger(__name__)

DEFAULT_MAX_LENGTH = 5000

# Marks a setting left unchanged by configure().
_UNCHANGED = object()


class PasteHappyLinker:
    """Encode and decode post text with a configured placement and limit."""

    def __init__(
        self,
        placement: str = DEFAULT_PLACEMENT,
        max_length: int | None = DEFAULT_MAX_LENGTH,
    ) -> None:
        self._placement = get_placement(placement)
        self._max_length = max_length
        self._data = LinkData()
        self._state_callbacks: Set[Callable[[], None]] = set()
        self._activity_callbacks: Set[Callable[[str], None]] = set()

    @property
    def data(self) -> LinkData:
        """Return the latest activity snapshot."""
        return self._data

    @property
    def placement(self) -> LinkPlacement:
        return self._placement

    @property
    def max_length(self) -> int | None:
        return self._max_length

    def configure(
        self,
        placement: str | None = None,
        max_length: Union[int, None, object] = _UNCHANGED,
    ) -> None:
        """Apply new settings; a max_length of None removes the limit."""
        if placement is not None:
            self._placement = get_placement(placement)
        if max_length is not _UNCHANGED:
            self._max_length = max_length
        _LOGGER.debug(
            "Linker configured: placement=%s max_length=%s",
            self._placement.key,
            self._max_length,
        )
        self._notify_state_change()

    def register_callback(self, callback: Callable[[], None]) -> Callable[[], None]:
        """Register a callback for state changes."""

        def unsubscribe() -> None:
            if callback in self._state_callbacks:
                self._state_callbacks.remove(callback)

        self._state_callbacks.add(callback)
        return unsubscribe

    def add_activity_callback(self, callback: Callable[[str], None]) -> None:
        """Add a callback for encode and decode activity."""
        self._activity_callbacks.add(callback)

    def remove_activity_callback(self, callback: Callable[[str], None]) -> None:
        """Remove a callback for encode and decode activity."""
        self._activity_callbacks.discard(callback)

    def encode(self, text: str) -> str:
        """Compress text into an escaped token."""
        length = len(split_code_units(text))
        if self._max_length is not None and length > self._max_length:
            raise InputTooLong(length, self._max_length)
        token = encode_token(text)
        _LOGGER.debug("Encoded %s code units into %s symbols", length, len(token))
        self._record(RESULT_ENCODED, token, length, len(token))
        return token

    def decode(self, token: str) -> str:
        """Decompress an escaped token back into text."""
        try:
            text = decode_token(token)
        except DecodeError as err:
            _LOGGER.warning("Rejected token of %s symbols: %s", len(token), err)
            self._record(RESULT_FAILED, token, None, len(token), error=str(err))
            raise
        self._record(RESULT_DECODED, token, len(text), len(token))
        return text

    def build_link(
        self,
        url: str,
        text: str,
        placement: str | None = None,
    ) -> str:
        """Return ``url`` carrying the encoded text."""
        target = get_placement(placement) if placement else self._placement
        return build_link(url, self.encode(text), target)

    def read_link(self, url: str) -> Optional[str]:
        """Return the text carried by ``url``, or None if it carries no token."""
        found = extract_token(url)
        if found is None:
            return None
        return self.decode(found[1])

    def _record(
        self,
        result: str,
        token: str,
        source_length: int | None,
        token_length: int,
        error: str | None = None,
    ) -> None:
        self._data.last_result = result
        self._data.last_token = token
        self._data.source_length = source_length
        self._data.token_length = token_length
        self._data.last_error = error
        self._data.last_update = time.time()
        self._notify_activity(result)
        self._notify_state_change()

    def _notify_state_change(self) -> None:
        """Notify all state callbacks."""
        for callback in list(self._state_callbacks):
            callback()

    def _notify_activity(self, activity: str) -> None:
        """Notify all activity callbacks."""
        for callback in list(self._activity_callbacks):
            callback(activity)
