"""Data models for link activity."""

from __future__ import annotations

from dataclasses import dataclass

RESULT_ENCODED = "encoded"
RESULT_DECODED = "decoded"
RESULT_FAILED = "decode_failed"


@dataclass
class LinkData:
    """Data class for the latest codec activity."""

    last_result: str | None = None
    last_token: str | None = None
    source_length: int | None = None
    token_length: int | None = None
    last_error: str | None = None
    last_update: float | None = None

    @property
    def compression_ratio(self) -> float | None:
        """Return token size as a percentage of the source text size."""
        if not self.source_length or self.token_length is None:
            return None
        return round(self.token_length / self.source_length * 100, 1)
