"""Config flow for Paste Happy integration."""

from __future__ import annotations

import logging
from typing import Any

from homeassistant.config_entries import (
    ConfigEntry,
    ConfigFlow,
    ConfigFlowResult,
    OptionsFlow,
)
from homeassistant.const import CONF_NAME
from homeassistant.core import callback
import voluptuous as vol

from .pastehappy_codec import DEFAULT_MAX_LENGTH, DEFAULT_PLACEMENT
from .pastehappy_codec.registry import LINK_PLACEMENTS

DOMAIN = "paste_happy"
CONF_PLACEMENT = "placement"
CONF_MAX_LENGTH = "max_length"

DEFAULT_NAME = "Paste Happy"

_LOGGER = logging.getLogger(__name__)


def _placement_choices() -> dict[str, str]:
    return {placement.key: placement.label for placement in LINK_PLACEMENTS}


def _settings_schema(placement: str, max_length: int) -> dict[vol.Marker, Any]:
    return {
        vol.Required(CONF_PLACEMENT, default=placement): vol.In(_placement_choices()),
        vol.Required(CONF_MAX_LENGTH, default=max_length): vol.All(
            vol.Coerce(int), vol.Range(min=1)
        ),
    }


class PasteHappyConfigFlow(ConfigFlow, domain=DOMAIN):
    """Handle a config flow for Paste Happy."""

    VERSION = 1

    @staticmethod
    @callback
    def async_get_options_flow(config_entry: ConfigEntry) -> OptionsFlow:
        """Return the options flow."""
        return PasteHappyOptionsFlow()

    async def async_step_user(
        self, user_input: dict[str, Any] | None = None
    ) -> ConfigFlowResult:
        """Handle the user step."""
        if user_input is not None:
            name = user_input[CONF_NAME].strip() or DEFAULT_NAME
            await self.async_set_unique_id(name.lower())
            self._abort_if_unique_id_configured()
            _LOGGER.debug(
                "Creating Paste Happy entry %s with %s placement",
                name,
                user_input[CONF_PLACEMENT],
            )
            return self.async_create_entry(
                title=name,
                data={
                    CONF_NAME: name,
                    CONF_PLACEMENT: user_input[CONF_PLACEMENT],
                    CONF_MAX_LENGTH: user_input[CONF_MAX_LENGTH],
                },
            )

        schema = vol.Schema(
            {
                vol.Required(CONF_NAME, default=DEFAULT_NAME): str,
                **_settings_schema(DEFAULT_PLACEMENT, DEFAULT_MAX_LENGTH),
            }
        )
        return self.async_show_form(step_id="user", data_schema=schema)


class PasteHappyOptionsFlow(OptionsFlow):
    """Handle Paste Happy options."""

    async def async_step_init(
        self, user_input: dict[str, Any] | None = None
    ) -> ConfigFlowResult:
        """Manage the link options."""
        if user_input is not None:
            return self.async_create_entry(data=user_input)

        entry = self.config_entry
        placement = entry.options.get(
            CONF_PLACEMENT, entry.data.get(CONF_PLACEMENT, DEFAULT_PLACEMENT)
        )
        max_length = entry.options.get(
            CONF_MAX_LENGTH, entry.data.get(CONF_MAX_LENGTH, DEFAULT_MAX_LENGTH)
        )
        return self.async_show_form(
            step_id="init",
            data_schema=vol.Schema(_settings_schema(placement, max_length)),
        )
