"""Tests for the climate and humidity entities."""

import math
from unittest.mock import AsyncMock, MagicMock

from homeassistant.components.climate.const import HVACAction, HVACMode
from homeassistant.const import ATTR_TEMPERATURE
from homeassistant.exceptions import HomeAssistantError
import pytest

from custom_components.daikin_local.climate import DaikinClimate
from custom_components.daikin_local.daikin_client import DaikinClient
from custom_components.daikin_local.errors import DeviceRejectedError
from custom_components.daikin_local.models import (
    ClimateState,
    OperatingMode,
    PowerState,
    TargetMode,
)
from custom_components.daikin_local.sensor import DaikinHumiditySensor


def _state(**overrides) -> ClimateState:
    values = {
        "power": PowerState.ACTIVE,
        "operating_mode": OperatingMode.COOLING,
        "target_mode": TargetMode.COOL,
        "current_temperature": 27.5,
        "threshold_temperature": 26.0,
        "humidity": 55.0,
    }
    values.update(overrides)
    return ClimateState(**values)


@pytest.fixture
def mock_client():
    client = AsyncMock(spec=DaikinClient)
    client.name = "Living room"
    return client


@pytest.fixture
def coordinator():
    coordinator = MagicMock()
    coordinator.async_request_refresh = AsyncMock()
    return coordinator


@pytest.fixture
def entity(coordinator, mock_client):
    entity = DaikinClimate(coordinator, mock_client, "entry1")
    entity.set_values(_state())
    return entity


class TestClimateState:
    """Tests for state mapping."""

    def test_cooling(self, entity):
        assert entity.hvac_mode == HVACMode.COOL
        assert entity.hvac_action == HVACAction.COOLING
        assert entity.current_temperature == 27.5
        assert entity.target_temperature == 26.0
        assert entity.min_temp == 18
        assert entity.max_temp == 32

    def test_heating_limits(self, entity):
        entity.set_values(
            _state(operating_mode=OperatingMode.HEATING, target_mode=TargetMode.HEAT)
        )
        assert entity.hvac_mode == HVACMode.HEAT
        assert entity.hvac_action == HVACAction.HEATING
        assert entity.min_temp == 15
        assert entity.max_temp == 30

    def test_off(self, entity):
        entity.set_values(
            _state(
                power=PowerState.INACTIVE,
                operating_mode=OperatingMode.INACTIVE,
                target_mode=TargetMode.AUTO,
            )
        )
        assert entity.hvac_mode == HVACMode.OFF
        assert entity.hvac_action == HVACAction.OFF

    def test_auto_idle(self, entity):
        entity.set_values(
            _state(operating_mode=OperatingMode.IDLE, target_mode=TargetMode.AUTO)
        )
        assert entity.hvac_mode == HVACMode.AUTO
        assert entity.hvac_action == HVACAction.IDLE

    def test_missing_readings_are_unknown(self, entity):
        entity.set_values(
            _state(current_temperature=math.nan, threshold_temperature=0.0)
        )
        assert entity.current_temperature is None
        assert entity.target_temperature is None

    def test_unique_id(self, entity):
        assert entity.unique_id == "daikin_local_entry1"


class TestClimateCommands:
    """Tests for service calls reaching the client."""

    @pytest.mark.asyncio
    async def test_set_temperature_cooling(self, entity, mock_client, coordinator):
        await entity.async_set_temperature(**{ATTR_TEMPERATURE: 24})
        mock_client.set_cooling_temperature.assert_awaited_once_with(24)
        mock_client.set_target_mode.assert_not_called()
        mock_client.set_heating_temperature.assert_not_called()
        coordinator.async_request_refresh.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_set_temperature_heating(self, entity, mock_client):
        entity.set_values(_state(target_mode=TargetMode.HEAT))
        await entity.async_set_temperature(**{ATTR_TEMPERATURE: 21})
        mock_client.set_heating_temperature.assert_awaited_once_with(21)

    @pytest.mark.asyncio
    async def test_set_temperature_with_hvac_mode(self, entity, mock_client):
        await entity.async_set_temperature(
            **{ATTR_TEMPERATURE: 20, "hvac_mode": HVACMode.HEAT}
        )
        mock_client.set_heating_temperature.assert_awaited_once_with(20)

    @pytest.mark.asyncio
    async def test_set_temperature_keeps_auto(self, entity, mock_client):
        entity.set_values(_state(target_mode=TargetMode.AUTO))
        await entity.async_set_temperature(**{ATTR_TEMPERATURE: 25})
        mock_client.set_cooling_temperature.assert_awaited_once_with(25)
        mock_client.set_target_mode.assert_awaited_once_with(TargetMode.AUTO)

    @pytest.mark.asyncio
    async def test_set_temperature_with_auto_hvac_mode(self, entity, mock_client):
        await entity.async_set_temperature(
            **{ATTR_TEMPERATURE: 23, "hvac_mode": HVACMode.AUTO}
        )
        mock_client.set_cooling_temperature.assert_awaited_once_with(23)
        mock_client.set_target_mode.assert_awaited_once_with(TargetMode.AUTO)

    @pytest.mark.asyncio
    async def test_set_temperature_without_value(self, entity, mock_client):
        await entity.async_set_temperature()
        mock_client.set_cooling_temperature.assert_not_called()

    @pytest.mark.asyncio
    async def test_set_hvac_mode_off(self, entity, mock_client):
        await entity.async_set_hvac_mode(HVACMode.OFF)
        mock_client.set_power.assert_awaited_once_with(PowerState.INACTIVE)
        mock_client.set_target_mode.assert_not_called()

    @pytest.mark.asyncio
    async def test_set_hvac_mode_while_on(self, entity, mock_client):
        await entity.async_set_hvac_mode(HVACMode.HEAT)
        mock_client.set_power.assert_not_called()
        mock_client.set_target_mode.assert_awaited_once_with(TargetMode.HEAT)

    @pytest.mark.asyncio
    async def test_set_hvac_mode_while_off(self, entity, mock_client):
        entity.set_values(_state(power=PowerState.INACTIVE))
        await entity.async_set_hvac_mode(HVACMode.AUTO)
        mock_client.set_power.assert_awaited_once_with(PowerState.ACTIVE)
        mock_client.set_target_mode.assert_awaited_once_with(TargetMode.AUTO)

    @pytest.mark.asyncio
    async def test_turn_on_and_off(self, entity, mock_client):
        await entity.async_turn_on()
        await entity.async_turn_off()
        assert [c.args for c in mock_client.set_power.await_args_list] == [
            (PowerState.ACTIVE,),
            (PowerState.INACTIVE,),
        ]

    @pytest.mark.asyncio
    async def test_rejection_is_reported(self, entity, mock_client, coordinator):
        mock_client.set_power.side_effect = DeviceRejectedError("PARAM NG")
        with pytest.raises(HomeAssistantError, match="PARAM NG"):
            await entity.async_turn_off()
        coordinator.async_request_refresh.assert_not_called()


class TestHumiditySensor:
    """Tests for the humidity sensor."""

    def test_value(self, coordinator, mock_client):
        sensor = DaikinHumiditySensor(coordinator, mock_client, "entry1")
        sensor.set_value(48.0)
        assert sensor.native_value == 48.0
        assert sensor.unique_id == "daikin_local_humidity_entry1"

    def test_unreadable_value(self, coordinator, mock_client):
        sensor = DaikinHumiditySensor(coordinator, mock_client, "entry1")
        sensor.set_value(math.nan)
        assert sensor.native_value is None
