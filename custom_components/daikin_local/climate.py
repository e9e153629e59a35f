"""Climate platform for Daikin Local integration."""

from __future__ import annotations

from datetime import timedelta
import logging
import math
from typing import Any, ClassVar

from homeassistant.components.climate import ClimateEntity
from homeassistant.components.climate.const import (
    ATTR_HVAC_MODE,
    ClimateEntityFeature,
    HVACAction,
    HVACMode,
)
from homeassistant.const import ATTR_TEMPERATURE, UnitOfTemperature
from homeassistant.core import HomeAssistant
from homeassistant.exceptions import HomeAssistantError
from homeassistant.helpers.entity_platform import AddEntitiesCallback
from homeassistant.helpers.update_coordinator import (
    CoordinatorEntity,
    DataUpdateCoordinator,
    UpdateFailed,
)

from .__init__ import DaikinConfigEntry
from .const import (
    CONF_REFRESH_RATE,
    COOLING_MAX_TEMP,
    COOLING_MIN_TEMP,
    DEFAULT_REFRESH_RATE,
    DOMAIN,
    HEATING_MAX_TEMP,
    HEATING_MIN_TEMP,
    TEMPERATURE_STEP,
)
from .daikin_client import DaikinClient
from .errors import DaikinError
from .models import ClimateState, OperatingMode, PowerState, TargetMode

_LOGGER = logging.getLogger(__name__)

MAP_TARGET_MODE_TO_HVAC = {
    TargetMode.AUTO: HVACMode.AUTO,
    TargetMode.COOL: HVACMode.COOL,
    TargetMode.HEAT: HVACMode.HEAT,
}

MAP_HVAC_TO_TARGET_MODE = {v: k for k, v in MAP_TARGET_MODE_TO_HVAC.items()}

MAP_OPERATING_MODE_TO_ACTION = {
    OperatingMode.INACTIVE: HVACAction.OFF,
    OperatingMode.IDLE: HVACAction.IDLE,
    OperatingMode.COOLING: HVACAction.COOLING,
    OperatingMode.HEATING: HVACAction.HEATING,
}


async def async_setup_entry(
    hass: HomeAssistant,
    entry: DaikinConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """Set up the climate platform from a config entry."""
    client = entry.runtime_data
    refresh_rate = entry.data.get(CONF_REFRESH_RATE, DEFAULT_REFRESH_RATE)

    async def async_update_data() -> ClimateState:
        """Update data from the unit."""
        try:
            return await client.get_state()
        except DaikinError as err:
            raise UpdateFailed(f"Failed to update climate data: {err}") from err

    coordinator = DataUpdateCoordinator(
        hass,
        _LOGGER,
        name="climate",
        update_method=async_update_data,
        update_interval=timedelta(seconds=refresh_rate),
        config_entry=entry,
    )

    await coordinator.async_config_entry_first_refresh()

    entity = DaikinClimate(coordinator, client, entry.entry_id)
    entity.set_values(coordinator.data)

    def update_entities() -> None:
        """Update the entity when the coordinator updates."""
        entity.set_values(coordinator.data)
        entity.async_write_ha_state()

    coordinator.async_add_listener(update_entities)

    async_add_entities([entity])


class DaikinClimate(CoordinatorEntity, ClimateEntity):
    """Representation of a Daikin air conditioner."""

    _attr_has_entity_name = True
    _attr_name = None
    _attr_icon = "mdi:air-conditioner"
    _attr_target_temperature_step = TEMPERATURE_STEP
    _attr_temperature_unit = UnitOfTemperature.CELSIUS
    _attr_hvac_modes: ClassVar = [
        HVACMode.OFF,
        HVACMode.AUTO,
        HVACMode.COOL,
        HVACMode.HEAT,
    ]
    _attr_supported_features: ClassVar = (
        ClimateEntityFeature.TARGET_TEMPERATURE
        | ClimateEntityFeature.TURN_ON
        | ClimateEntityFeature.TURN_OFF
    )

    def __init__(
        self,
        coordinator: DataUpdateCoordinator,
        client: DaikinClient,
        entry_id: str,
    ) -> None:
        """Initialize the climate entity."""
        super().__init__(coordinator)
        self._client = client
        self._attr_unique_id = f"daikin_local_{entry_id}"
        self._attr_device_info = {
            "identifiers": {(DOMAIN, entry_id)},
            "name": client.name,
            "manufacturer": "Daikin",
        }

        self._power = PowerState.INACTIVE
        self._operating_mode = OperatingMode.INACTIVE
        self._target_mode = TargetMode.AUTO
        self._current_temp: float | None = None
        self._target_temp: float | None = None

    @property
    def current_temperature(self) -> float | None:
        """Return the current temperature."""
        return self._current_temp

    @property
    def target_temperature(self) -> float | None:
        """Return the target temperature."""
        return self._target_temp

    @property
    def hvac_mode(self) -> HVACMode:
        """Return the current HVAC mode."""
        if self._power is PowerState.INACTIVE:
            return HVACMode.OFF
        return MAP_TARGET_MODE_TO_HVAC[self._target_mode]

    @property
    def hvac_action(self) -> HVACAction:
        """Return the current HVAC action."""
        return MAP_OPERATING_MODE_TO_ACTION[self._operating_mode]

    @property
    def min_temp(self) -> float:
        """Return the lowest setpoint for the current mode."""
        if self._target_mode is TargetMode.HEAT:
            return HEATING_MIN_TEMP
        return COOLING_MIN_TEMP

    @property
    def max_temp(self) -> float:
        """Return the highest setpoint for the current mode."""
        if self._target_mode is TargetMode.HEAT:
            return HEATING_MAX_TEMP
        return COOLING_MAX_TEMP

    async def async_set_temperature(self, **kwargs: Any) -> None:
        """Set new target temperature.

        The unit only takes a setpoint together with cool or heat, so in auto
        the cooling setpoint is written and auto is selected again after.
        """
        temperature = kwargs.get(ATTR_TEMPERATURE)
        if temperature is None:
            return

        target_mode = MAP_HVAC_TO_TARGET_MODE.get(
            kwargs.get(ATTR_HVAC_MODE), self._target_mode
        )
        try:
            if target_mode is TargetMode.HEAT:
                await self._client.set_heating_temperature(temperature)
            else:
                await self._client.set_cooling_temperature(temperature)
                if target_mode is TargetMode.AUTO:
                    await self._client.set_target_mode(TargetMode.AUTO)
        except DaikinError as err:
            raise HomeAssistantError(f"Failed to set temperature: {err}") from err

        await self.coordinator.async_request_refresh()

    async def async_set_hvac_mode(self, hvac_mode: HVACMode) -> None:
        """Set new HVAC mode."""
        try:
            if hvac_mode == HVACMode.OFF:
                await self._client.set_power(PowerState.INACTIVE)
            else:
                if self._power is PowerState.INACTIVE:
                    await self._client.set_power(PowerState.ACTIVE)
                await self._client.set_target_mode(MAP_HVAC_TO_TARGET_MODE[hvac_mode])
        except DaikinError as err:
            raise HomeAssistantError(f"Failed to set HVAC mode: {err}") from err

        await self.coordinator.async_request_refresh()

    async def async_turn_on(self) -> None:
        """Turn the unit on in the mode suited to the room temperature."""
        await self._async_set_power(PowerState.ACTIVE)

    async def async_turn_off(self) -> None:
        """Turn the unit off."""
        await self._async_set_power(PowerState.INACTIVE)

    async def _async_set_power(self, power: PowerState) -> None:
        try:
            await self._client.set_power(power)
        except DaikinError as err:
            raise HomeAssistantError(f"Failed to set power: {err}") from err

        await self.coordinator.async_request_refresh()

    def set_values(self, state: ClimateState) -> None:
        """Update entity values from a state snapshot."""
        self._power = state.power
        self._operating_mode = state.operating_mode
        self._target_mode = state.target_mode
        self._current_temp = (
            None
            if math.isnan(state.current_temperature)
            else state.current_temperature
        )
        self._target_temp = state.threshold_temperature or None
