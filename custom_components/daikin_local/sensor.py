"""Sensor platform for Daikin Local integration."""

from __future__ import annotations

from datetime import timedelta
import logging
import math

from homeassistant.components.sensor import (
    SensorDeviceClass,
    SensorEntity,
    SensorStateClass,
)
from homeassistant.const import PERCENTAGE
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddEntitiesCallback
from homeassistant.helpers.update_coordinator import (
    CoordinatorEntity,
    DataUpdateCoordinator,
    UpdateFailed,
)

from .__init__ import DaikinConfigEntry
from .const import CONF_REFRESH_RATE, DEFAULT_REFRESH_RATE, DOMAIN
from .daikin_client import DaikinClient
from .errors import DaikinError

_LOGGER = logging.getLogger(__name__)


async def async_setup_entry(
    hass: HomeAssistant,
    entry: DaikinConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """Set up the sensor platform from a config entry."""
    client = entry.runtime_data
    refresh_rate = entry.data.get(CONF_REFRESH_RATE, DEFAULT_REFRESH_RATE)

    async def async_update_data() -> float:
        """Update data from the unit."""
        try:
            return await client.get_current_humidity()
        except DaikinError as err:
            raise UpdateFailed(f"Failed to update humidity data: {err}") from err

    coordinator = DataUpdateCoordinator(
        hass,
        _LOGGER,
        name="sensor",
        update_method=async_update_data,
        update_interval=timedelta(seconds=refresh_rate),
        config_entry=entry,
    )

    await coordinator.async_config_entry_first_refresh()

    humidity_sensor = DaikinHumiditySensor(coordinator, client, entry.entry_id)
    humidity_sensor.set_value(coordinator.data)

    def update_entities() -> None:
        """Update the sensor when the coordinator updates."""
        humidity_sensor.set_value(coordinator.data)
        humidity_sensor.async_write_ha_state()

    coordinator.async_add_listener(update_entities)

    async_add_entities([humidity_sensor])


class DaikinHumiditySensor(CoordinatorEntity, SensorEntity):
    """Relative humidity measured by the unit."""

    _attr_has_entity_name = True
    _attr_name = "Humidity"
    _attr_device_class = SensorDeviceClass.HUMIDITY
    _attr_state_class = SensorStateClass.MEASUREMENT
    _attr_native_unit_of_measurement = PERCENTAGE

    def __init__(
        self,
        coordinator: DataUpdateCoordinator,
        client: DaikinClient,
        entry_id: str,
    ) -> None:
        """Initialize the sensor."""
        super().__init__(coordinator)
        self._attr_unique_id = f"daikin_local_humidity_{entry_id}"
        self._attr_device_info = {
            "identifiers": {(DOMAIN, entry_id)},
            "name": client.name,
            "manufacturer": "Daikin",
        }
        self._humidity: float | None = None

    @property
    def native_value(self) -> float | None:
        """Return the relative humidity."""
        return self._humidity

    def set_value(self, humidity: float) -> None:
        """Set the humidity, treating an unreadable value as unknown."""
        self._humidity = None if math.isnan(humidity) else humidity
