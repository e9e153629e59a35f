"""Client for the Daikin local HTTP API."""

from __future__ import annotations

import logging
import math
import re

from .const import DEFAULT_COOLING_HEATING_THRESHOLD, DEFAULT_NAME
from .errors import DeviceRejectedError
from .http_client import DaikinTransport
from .models import ClimateState, OperatingMode, PowerState, TargetMode
from .protocol import (
    BASIC_INFO_PATH,
    CONTROL_INFO_PATH,
    RET_OK,
    SENSOR_INFO_PATH,
    SET_CONTROL_INFO_PATH,
    build_query,
    format_temperature,
    parse_response,
)

_LOGGER = logging.getLogger(__name__)

# Device mode codes: 0 auto, 1 auto (humidify), 2 dry, 3 cool, 4 heat,
# 6 fan, HUM humidify.
MODE_AUTO = "1"
MODE_COOL = "3"
MODE_HEAT = "4"
MODE_UNSET = "0"

OPERATING_MODES = {
    "0": OperatingMode.IDLE,
    "1": OperatingMode.IDLE,
    "2": OperatingMode.IDLE,
    "3": OperatingMode.COOLING,
    "4": OperatingMode.HEATING,
    "6": OperatingMode.IDLE,
    "HUM": OperatingMode.IDLE,
}

TARGET_MODES = {
    "0": TargetMode.AUTO,
    "1": TargetMode.AUTO,
    "2": TargetMode.AUTO,
    "3": TargetMode.COOL,
    "4": TargetMode.HEAT,
    "6": TargetMode.AUTO,
    "HUM": TargetMode.AUTO,
}

TARGET_MODE_CODES = {
    TargetMode.AUTO: MODE_AUTO,
    TargetMode.COOL: MODE_COOL,
    TargetMode.HEAT: MODE_HEAT,
}

POWER_CODES = {
    PowerState.ACTIVE: "1",
    PowerState.INACTIVE: "0",
}

# Threshold band (degrees either side) inside which power-on selects auto.
THRESHOLD_BAND = 2

_STEMP_PATTERN = re.compile(r"^[0-9.]+$")


def to_float(value: str | None) -> float:
    """Parse a device reading, returning nan when it is not a number."""
    try:
        return float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return math.nan


def operating_mode(params: dict[str, str]) -> OperatingMode:
    """Map control info to the current operating mode."""
    if params.get("pow") != "1":
        return OperatingMode.INACTIVE
    return OPERATING_MODES.get(params.get("mode", ""), OperatingMode.IDLE)


def target_mode(params: dict[str, str]) -> TargetMode:
    """Map control info to the target mode."""
    if params.get("pow") != "1":
        return TargetMode.AUTO
    return TARGET_MODES.get(params.get("mode", ""), TargetMode.AUTO)


def threshold_temperature(params: dict[str, str]) -> float | None:
    """Return the numeric setpoint, or None if the device reported none."""
    stemp = params.get("stemp")
    if not stemp or not _STEMP_PATTERN.match(stemp):
        return None
    temperature = to_float(stemp)
    return None if math.isnan(temperature) else temperature


def select_power_on_mode(htemp: float, threshold: float) -> str:
    """Pick the mode to switch on with from the room temperature.

    Inside the band around the threshold the unit runs in auto; above it the
    cool branch wins and below it the heat branch. The branches are checked
    in this order and the first match is taken.
    """
    if threshold - THRESHOLD_BAND < htemp < threshold + THRESHOLD_BAND:
        return MODE_AUTO
    if htemp > threshold - THRESHOLD_BAND:
        return MODE_COOL
    if htemp < threshold + THRESHOLD_BAND:
        return MODE_HEAT
    return MODE_UNSET


class DaikinClient:
    """Read and write the state of a single Daikin unit.

    The device is the only source of truth: every call fetches fresh state and
    writes send the complete parameter set. Nothing is locked between the fetch
    and the write, so a change made on the unit in between is overwritten.
    """

    def __init__(
        self,
        transport: DaikinTransport,
        name: str = DEFAULT_NAME,
        cooling_heating_threshold: float = DEFAULT_COOLING_HEATING_THRESHOLD,
        logger: logging.Logger | None = None,
    ) -> None:
        """Initialize the client."""
        self.transport = transport
        self.name = name
        self.cooling_heating_threshold = cooling_heating_threshold
        self._logger = logger or _LOGGER

    @property
    def host(self) -> str:
        """Return the device base URL."""
        return self.transport.host

    async def get_power(self) -> PowerState:
        """Return whether the unit is switched on."""
        params = await self._fetch(BASIC_INFO_PATH)
        power = PowerState.ACTIVE if params.get("pow") == "1" else PowerState.INACTIVE
        self._logger.debug("%s got power state %s", self.name, power)
        return power

    async def get_current_mode(self) -> OperatingMode:
        """Return what the unit is currently doing."""
        mode = operating_mode(await self._fetch(CONTROL_INFO_PATH))
        self._logger.debug("%s got operating mode %s", self.name, mode)
        return mode

    async def get_target_mode(self) -> TargetMode:
        """Return the mode the unit is set to."""
        mode = target_mode(await self._fetch(CONTROL_INFO_PATH))
        self._logger.debug("%s got target mode %s", self.name, mode)
        return mode

    async def get_current_temperature(self) -> float:
        """Return the room temperature."""
        params = await self._fetch(SENSOR_INFO_PATH)
        temperature = to_float(params.get("htemp"))
        self._logger.debug("%s got current temperature %s", self.name, temperature)
        return temperature

    async def get_threshold_temperature(self) -> float:
        """Return the setpoint, or 0.0 when the current mode has none."""
        params = await self._fetch(CONTROL_INFO_PATH)
        temperature = threshold_temperature(params)
        if temperature is None:
            self._logger.warning(
                "%s could not get threshold temperature: %s", self.name, params
            )
            return 0.0
        self._logger.debug("%s got threshold temperature %s", self.name, temperature)
        return temperature

    async def get_current_humidity(self) -> float:
        """Return the relative humidity."""
        params = await self._fetch(SENSOR_INFO_PATH)
        humidity = to_float(params.get("hhum"))
        self._logger.debug("%s got current relative humidity %s", self.name, humidity)
        return humidity

    async def get_state(self) -> ClimateState:
        """Return a snapshot from one control and one sensor fetch."""
        control = await self._fetch(CONTROL_INFO_PATH)
        sensor = await self._fetch(SENSOR_INFO_PATH)
        temperature = threshold_temperature(control)
        if temperature is None:
            self._logger.debug("%s reports no threshold temperature", self.name)
        return ClimateState(
            power=(
                PowerState.ACTIVE if control.get("pow") == "1" else PowerState.INACTIVE
            ),
            operating_mode=operating_mode(control),
            target_mode=target_mode(control),
            current_temperature=to_float(sensor.get("htemp")),
            threshold_temperature=temperature or 0.0,
            humidity=to_float(sensor.get("hhum")),
        )

    async def set_power(self, power: PowerState) -> None:
        """Switch the unit on or off, choosing the mode from room temperature."""
        params = await self._fetch(CONTROL_INFO_PATH)
        sensor = await self._fetch(SENSOR_INFO_PATH)
        mode = select_power_on_mode(
            to_float(sensor.get("htemp")), self.cooling_heating_threshold
        )
        params["pow"] = POWER_CODES[power]
        params["mode"] = mode
        self._logger.debug("%s setting power %s in mode %s", self.name, power, mode)
        await self._write(params)

    async def set_target_mode(self, mode: TargetMode) -> None:
        """Change the operating mode, keeping the other parameters."""
        params = await self._fetch(CONTROL_INFO_PATH)
        code = TARGET_MODE_CODES.get(mode)
        if code is not None:
            params["mode"] = code
        self._logger.debug("%s setting target mode %s", self.name, mode)
        await self._write(params)

    async def set_cooling_temperature(self, temperature: float) -> None:
        """Switch to cooling at the given setpoint."""
        await self._set_temperature(MODE_COOL, "dt3", temperature)

    async def set_heating_temperature(self, temperature: float) -> None:
        """Switch to heating at the given setpoint."""
        await self._set_temperature(MODE_HEAT, "dt4", temperature)

    async def _set_temperature(
        self, mode: str, memory_key: str, temperature: float
    ) -> None:
        """Write a setpoint along with the mode's remembered setpoint."""
        params = await self._fetch(CONTROL_INFO_PATH)
        value = format_temperature(temperature)
        params["pow"] = "1"
        params["mode"] = mode
        params["stemp"] = value
        params[memory_key] = value
        self._logger.debug(
            "%s setting temperature %s in mode %s", self.name, value, mode
        )
        await self._write(params)

    async def _fetch(self, path: str) -> dict[str, str]:
        """Request a path and parse the response."""
        return parse_response(await self.transport.get(path))

    async def _write(self, params: dict[str, str]) -> None:
        """Send a full control write and check the device status."""
        result = await self._fetch(f"{SET_CONTROL_INFO_PATH}?{build_query(params)}")
        ret = result.get("ret", "")
        if ret != RET_OK:
            self._logger.error("%s rejected control write: %s", self.name, ret)
            raise DeviceRejectedError(ret)
