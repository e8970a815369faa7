"""Support for Paste Happy sensors."""

from __future__ import annotations

from homeassistant.components.sensor import (
    SensorEntity,
    SensorEntityDescription,
    SensorStateClass,
)
from homeassistant.config_entries import ConfigEntry
from homeassistant.const import PERCENTAGE, EntityCategory
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddEntitiesCallback

from .pastehappy_codec import PasteHappyLinker

DOMAIN = "paste_happy"

SENSOR_TYPES: dict[str, SensorEntityDescription] = {
    "token_length": SensorEntityDescription(
        key="token_length",
        name="Token Length",
        native_unit_of_measurement="characters",
        state_class=SensorStateClass.MEASUREMENT,
        entity_category=EntityCategory.DIAGNOSTIC,
        has_entity_name=True,
    ),
    "source_length": SensorEntityDescription(
        key="source_length",
        name="Source Length",
        native_unit_of_measurement="characters",
        state_class=SensorStateClass.MEASUREMENT,
        entity_category=EntityCategory.DIAGNOSTIC,
        has_entity_name=True,
    ),
    "compression_ratio": SensorEntityDescription(
        key="compression_ratio",
        name="Compression Ratio",
        native_unit_of_measurement=PERCENTAGE,
        state_class=SensorStateClass.MEASUREMENT,
        entity_category=EntityCategory.DIAGNOSTIC,
        has_entity_name=True,
    ),
    "last_result": SensorEntityDescription(
        key="last_result",
        name="Last Result",
        entity_category=EntityCategory.DIAGNOSTIC,
        has_entity_name=True,
    ),
}


async def async_setup_entry(
    hass: HomeAssistant,
    entry: ConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """Set up Paste Happy sensors."""
    linker = hass.data[DOMAIN][entry.entry_id]["linker"]
    async_add_entities(
        PasteHappySensor(linker, entry, description)
        for description in SENSOR_TYPES.values()
    )


class PasteHappySensor(SensorEntity):
    """Sensor reading the latest linker activity."""

    _attr_has_entity_name = True
    _attr_should_poll = False

    def __init__(
        self,
        linker: PasteHappyLinker,
        entry: ConfigEntry,
        description: SensorEntityDescription,
    ) -> None:
        """Initialize the sensor."""
        self.linker = linker
        self.entity_description = description
        self._attr_unique_id = f"{entry.entry_id}_{description.key}"
        self._attr_device_info = {
            "identifiers": {(DOMAIN, entry.entry_id)},
            "name": entry.title,
            "model": linker.placement.label,
            "manufacturer": "Paste Happy",
        }
        self._unsubscribe = None

    async def async_added_to_hass(self) -> None:
        """Register callbacks."""
        self._unsubscribe = self.linker.register_callback(self._handle_state_change)

    def _handle_state_change(self) -> None:
        """Handle state changes."""
        self.async_write_ha_state()

    @property
    def native_value(self) -> str | int | float | None:
        """Return the native value."""
        data = self.linker.data
        if self.entity_description.key == "token_length":
            return data.token_length
        if self.entity_description.key == "source_length":
            return data.source_length
        if self.entity_description.key == "compression_ratio":
            return data.compression_ratio
        if self.entity_description.key == "last_result":
            return data.last_result
        return None

    async def async_will_remove_from_hass(self) -> None:
        """Run when entity will be removed."""
        if self._unsubscribe:
            self._unsubscribe()
            self._unsubscribe = None
