"""Support for Paste Happy events."""

from __future__ import annotations

from homeassistant.components.event import EventEntity
from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddEntitiesCallback

from .pastehappy_codec import PasteHappyLinker
from .pastehappy_codec.models import RESULT_DECODED, RESULT_ENCODED, RESULT_FAILED

DOMAIN = "paste_happy"

EVENT_TYPES = [RESULT_ENCODED, RESULT_DECODED, RESULT_FAILED]


async def async_setup_entry(
    hass: HomeAssistant,
    entry: ConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """Set up Paste Happy event based on a config entry."""
    linker = hass.data[DOMAIN][entry.entry_id]["linker"]
    async_add_entities([PasteHappyActivityEvent(linker, entry)])


class PasteHappyActivityEvent(EventEntity):
    """Defines an encode/decode activity event."""

    _attr_has_entity_name = True
    _attr_name = "Activity"
    _attr_event_types = EVENT_TYPES

    def __init__(self, linker: PasteHappyLinker, entry: ConfigEntry) -> None:
        """Initialize the event entity."""
        self.linker = linker
        self._attr_unique_id = f"{entry.entry_id}_activity"
        self._attr_device_info = {
            "identifiers": {(DOMAIN, entry.entry_id)},
            "name": entry.title,
            "model": linker.placement.label,
            "manufacturer": "Paste Happy",
        }

    async def async_added_to_hass(self) -> None:
        """Register callbacks."""
        self.linker.add_activity_callback(self._handle_activity)

    def _handle_activity(self, activity: str) -> None:
        """Handle activity from the linker."""
        if activity in EVENT_TYPES:
            data = self.linker.data
            self._trigger_event(
                activity,
                {
                    "source_length": data.source_length,
                    "token_length": data.token_length,
                    "error": data.last_error,
                },
            )
            self.async_write_ha_state()

    async def async_will_remove_from_hass(self) -> None:
        """Unregister callbacks."""
        self.linker.remove_activity_callback(self._handle_activity)
