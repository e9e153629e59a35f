"""Daikin Local integration for Home Assistant."""

from __future__ import annotations

from typing import Final

from homeassistant.config_entries import ConfigEntry
from homeassistant.const import CONF_HOST, CONF_NAME, Platform
from homeassistant.core import HomeAssistant

from .const import (
    CONF_COOLING_HEATING_THRESHOLD,
    DEFAULT_COOLING_HEATING_THRESHOLD,
    DEFAULT_HOST,
    DEFAULT_NAME,
)
from .daikin_client import DaikinClient
from .http_client import DaikinTransport

type DaikinConfigEntry = ConfigEntry[DaikinClient]

PLATFORMS: Final = [Platform.CLIMATE, Platform.SENSOR]


def create_client(data: dict) -> DaikinClient:
    """Build a client from config entry data."""
    return DaikinClient(
        DaikinTransport(data.get(CONF_HOST, DEFAULT_HOST)),
        name=data.get(CONF_NAME, DEFAULT_NAME),
        cooling_heating_threshold=(
            data.get(CONF_COOLING_HEATING_THRESHOLD)
            or DEFAULT_COOLING_HEATING_THRESHOLD
        ),
    )


async def async_setup_entry(hass: HomeAssistant, entry: DaikinConfigEntry) -> bool:
    """Set up Daikin Local from a config entry."""
    entry.runtime_data = create_client(dict(entry.data))

    await hass.config_entries.async_forward_entry_setups(entry, PLATFORMS)

    return True


async def async_unload_entry(hass: HomeAssistant, entry: DaikinConfigEntry) -> bool:
    """Unload a config entry."""
    return await hass.config_entries.async_unload_platforms(entry, PLATFORMS)
