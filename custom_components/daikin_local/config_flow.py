"""Config flow for Daikin Local integration."""

from __future__ import annotations

import logging
from typing import Any

import voluptuous as vol

from homeassistant import config_entries
from homeassistant.const import CONF_HOST, CONF_NAME
from homeassistant.core import HomeAssistant
from homeassistant.exceptions import HomeAssistantError

from .__init__ import create_client
from .const import (
    CONF_COOLING_HEATING_THRESHOLD,
    CONF_REFRESH_RATE,
    DEFAULT_COOLING_HEATING_THRESHOLD,
    DEFAULT_HOST,
    DEFAULT_NAME,
    DEFAULT_REFRESH_RATE,
    DOMAIN,
)
from .errors import DaikinError
from .http_client import normalize_host

_LOGGER = logging.getLogger(__name__)


class CannotConnectError(HomeAssistantError):
    """Error to indicate the unit could not be reached."""


async def _async_validate_input(
    hass: HomeAssistant, data: dict[str, Any]
) -> dict[str, Any]:
    """Validate the user input allows us to connect."""
    client = create_client(data)

    try:
        await client.get_power()
    except DaikinError as err:
        _LOGGER.error("Failed to connect to %s: %s", client.host, err)
        raise CannotConnectError(f"Cannot connect: {err}") from err

    return {"title": data.get(CONF_NAME, DEFAULT_NAME)}


def _data_schema(current: dict[str, Any]) -> vol.Schema:
    """Return the form schema, prefilled from current values."""
    return vol.Schema(
        {
            vol.Required(CONF_HOST, default=current.get(CONF_HOST, DEFAULT_HOST)): str,
            vol.Optional(CONF_NAME, default=current.get(CONF_NAME, DEFAULT_NAME)): str,
            vol.Optional(
                CONF_COOLING_HEATING_THRESHOLD,
                default=current.get(
                    CONF_COOLING_HEATING_THRESHOLD, DEFAULT_COOLING_HEATING_THRESHOLD
                ),
            ): vol.Coerce(float),
            vol.Optional(
                CONF_REFRESH_RATE,
                default=current.get(CONF_REFRESH_RATE, DEFAULT_REFRESH_RATE),
            ): int,
        }
    )


class DaikinLocalConfigFlow(config_entries.ConfigFlow, domain=DOMAIN):
    """Handle a config flow for Daikin Local."""

    VERSION = 1

    async def async_step_user(
        self, user_input: dict[str, Any] | None = None
    ) -> config_entries.ConfigFlowResult:
        """Handle the initial step."""
        errors: dict[str, str] = {}

        if user_input is not None:
            await self.async_set_unique_id(normalize_host(user_input[CONF_HOST]))
            self._abort_if_unique_id_configured()

            try:
                info = await _async_validate_input(self.hass, user_input)
            except CannotConnectError:
                errors["base"] = "cannot_connect"
            except Exception:
                _LOGGER.exception("Unexpected error validating connection")
                errors["base"] = "unknown"
            else:
                return self.async_create_entry(title=info["title"], data=user_input)

        return self.async_show_form(
            step_id="user", data_schema=_data_schema(user_input or {}), errors=errors
        )

    async def async_step_reconfigure(
        self, user_input: dict[str, Any] | None = None
    ) -> config_entries.ConfigFlowResult:
        """Handle changing the host or threshold of an existing entry."""
        entry = self._get_reconfigure_entry()
        errors: dict[str, str] = {}

        if user_input is not None:
            unique_id = normalize_host(user_input[CONF_HOST])
            if unique_id != entry.unique_id:
                await self.async_set_unique_id(unique_id)
                self._abort_if_unique_id_configured()

            try:
                await _async_validate_input(self.hass, user_input)
            except CannotConnectError:
                errors["base"] = "cannot_connect"
            except Exception:
                _LOGGER.exception("Unexpected error validating connection")
                errors["base"] = "unknown"
            else:
                return self.async_update_reload_and_abort(
                    entry, unique_id=unique_id, data=user_input
                )

        return self.async_show_form(
            step_id="reconfigure",
            data_schema=_data_schema(user_input or dict(entry.data)),
            errors=errors,
        )
