"""The Paste Happy integration."""

from __future__ import annotations

import logging
from typing import Any

import voluptuous as vol

from homeassistant.config_entries import ConfigEntry
from homeassistant.const import CONF_NAME
from homeassistant.core import (
    HomeAssistant,
    ServiceCall,
    ServiceResponse,
    SupportsResponse,
)
from homeassistant.exceptions import HomeAssistantError
from homeassistant.helpers import config_validation as cv
from homeassistant.helpers.typing import ConfigType

from .pastehappy_codec import (
    DEFAULT_MAX_LENGTH,
    DEFAULT_PLACEMENT,
    DecodeError,
    InputTooLong,
    PasteHappyLinker,
    extract_token,
    placement_keys,
    strip_activation_params,
)

DOMAIN = "paste_happy"
CONF_PLACEMENT = "placement"
CONF_MAX_LENGTH = "max_length"

ATTR_CONFIG_ENTRY_ID = "config_entry_id"
ATTR_TEXT = "text"
ATTR_TOKEN = "token"
ATTR_URL = "url"
ATTR_PLACEMENT = "placement"

SERVICE_ENCODE_POST = "encode_post"
SERVICE_DECODE_POST = "decode_post"
SERVICE_BUILD_LINK = "build_link"
SERVICE_READ_LINK = "read_link"

_LOGGER = logging.getLogger(__name__)

PLATFORMS: list[str] = ["sensor", "event"]

CONFIG_SCHEMA = cv.config_entry_only_config_schema(DOMAIN)

ENCODE_POST_SCHEMA = vol.Schema(
    {
        vol.Required(ATTR_TEXT): cv.string,
        vol.Optional(ATTR_CONFIG_ENTRY_ID): cv.string,
    }
)
DECODE_POST_SCHEMA = vol.Schema(
    {
        vol.Required(ATTR_TOKEN): cv.string,
        vol.Optional(ATTR_CONFIG_ENTRY_ID): cv.string,
    }
)
BUILD_LINK_SCHEMA = vol.Schema(
    {
        vol.Required(ATTR_URL): cv.string,
        vol.Required(ATTR_TEXT): cv.string,
        vol.Optional(ATTR_PLACEMENT): vol.In(placement_keys()),
        vol.Optional(ATTR_CONFIG_ENTRY_ID): cv.string,
    }
)
READ_LINK_SCHEMA = vol.Schema(
    {
        vol.Required(ATTR_URL): cv.string,
        vol.Optional(ATTR_CONFIG_ENTRY_ID): cv.string,
    }
)


class PasteHappyError(HomeAssistantError):
    """Base class for Paste Happy errors."""


class PasteHappyDecodeError(PasteHappyError):
    """Raised when a token cannot be decoded."""


class PasteHappyInputError(PasteHappyError):
    """Raised when post text cannot be encoded."""


class PasteHappyNotLoadedError(PasteHappyError):
    """Raised when no matching config entry is loaded."""


def _entry_settings(entry: ConfigEntry) -> dict[str, Any]:
    """Return the effective settings, options taking precedence over data."""
    return {
        CONF_PLACEMENT: entry.options.get(
            CONF_PLACEMENT, entry.data.get(CONF_PLACEMENT, DEFAULT_PLACEMENT)
        ),
        CONF_MAX_LENGTH: entry.options.get(
            CONF_MAX_LENGTH, entry.data.get(CONF_MAX_LENGTH, DEFAULT_MAX_LENGTH)
        ),
    }


def _get_linker(hass: HomeAssistant, entry_id: str | None) -> PasteHappyLinker:
    entries = hass.data.get(DOMAIN, {})
    if entry_id:
        entry_data = entries.get(entry_id)
        if entry_data is None:
            raise PasteHappyNotLoadedError(f"Config entry {entry_id} is not loaded")
        return entry_data["linker"]
    if not entries:
        raise PasteHappyNotLoadedError("No Paste Happy config entry is loaded")
    return next(iter(entries.values()))["linker"]


def _encode(linker: PasteHappyLinker, text: str) -> str:
    try:
        return linker.encode(text)
    except InputTooLong as err:
        raise PasteHappyInputError(str(err)) from err


def _decode(linker: PasteHappyLinker, token: str) -> str:
    try:
        return linker.decode(token)
    except DecodeError as err:
        raise PasteHappyDecodeError(f"Token could not be decoded: {err}") from err


async def async_setup(hass: HomeAssistant, config: ConfigType) -> bool:
    """Set up the Paste Happy integration."""

    async def _async_encode_post(call: ServiceCall) -> ServiceResponse:
        linker = _get_linker(hass, call.data.get(ATTR_CONFIG_ENTRY_ID))
        text = call.data[ATTR_TEXT]
        token = _encode(linker, text)
        return {
            "token": token,
            "source_length": len(text),
            "token_length": len(token),
        }

    async def _async_decode_post(call: ServiceCall) -> ServiceResponse:
        linker = _get_linker(hass, call.data.get(ATTR_CONFIG_ENTRY_ID))
        return {"text": _decode(linker, call.data[ATTR_TOKEN])}

    async def _async_build_link(call: ServiceCall) -> ServiceResponse:
        linker = _get_linker(hass, call.data.get(ATTR_CONFIG_ENTRY_ID))
        try:
            link = linker.build_link(
                call.data[ATTR_URL],
                call.data[ATTR_TEXT],
                call.data.get(ATTR_PLACEMENT),
            )
        except InputTooLong as err:
            raise PasteHappyInputError(str(err)) from err
        return {"link": link, "token": linker.data.last_token}

    async def _async_read_link(call: ServiceCall) -> ServiceResponse:
        linker = _get_linker(hass, call.data.get(ATTR_CONFIG_ENTRY_ID))
        url = call.data[ATTR_URL]
        found = extract_token(url)
        if found is None:
            _LOGGER.debug("Link carries no post token")
            return {"text": None, "placement": None, "clean_url": url}
        placement, token = found
        return {
            "text": _decode(linker, token),
            "placement": placement,
            "clean_url": strip_activation_params(url),
        }

    for service, handler, schema in (
        (SERVICE_ENCODE_POST, _async_encode_post, ENCODE_POST_SCHEMA),
        (SERVICE_DECODE_POST, _async_decode_post, DECODE_POST_SCHEMA),
        (SERVICE_BUILD_LINK, _async_build_link, BUILD_LINK_SCHEMA),
        (SERVICE_READ_LINK, _async_read_link, READ_LINK_SCHEMA),
    ):
        hass.services.async_register(
            DOMAIN,
            service,
            handler,
            schema=schema,
            supports_response=SupportsResponse.ONLY,
        )
    return True


async def async_setup_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    """Set up Paste Happy from a config entry."""
    settings = _entry_settings(entry)
    linker = PasteHappyLinker(
        placement=settings[CONF_PLACEMENT],
        max_length=settings[CONF_MAX_LENGTH],
    )
    hass.data.setdefault(DOMAIN, {})[entry.entry_id] = {
        "linker": linker,
        "name": entry.data.get(CONF_NAME, entry.title),
    }
    _LOGGER.debug(
        "Paste Happy entry %s ready (placement=%s, max_length=%s)",
        entry.title,
        linker.placement.key,
        linker.max_length,
    )

    entry.async_on_unload(entry.add_update_listener(_async_update_listener))
    await hass.config_entries.async_forward_entry_setups(entry, PLATFORMS)
    return True


async def _async_update_listener(hass: HomeAssistant, entry: ConfigEntry) -> None:
    """Apply changed options to the running linker."""
    settings = _entry_settings(entry)
    linker: PasteHappyLinker = hass.data[DOMAIN][entry.entry_id]["linker"]
    linker.configure(
        placement=settings[CONF_PLACEMENT],
        max_length=settings[CONF_MAX_LENGTH],
    )


async def async_unload_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    """Unload a config entry."""
    if unload_ok := await hass.config_entries.async_unload_platforms(entry, PLATFORMS):
        hass.data[DOMAIN].pop(entry.entry_id)
    return unload_ok
