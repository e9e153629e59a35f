"""Normalized climate state models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class PowerState(StrEnum):
    """Power state of the unit."""

    ACTIVE = "active"
    INACTIVE = "inactive"


class OperatingMode(StrEnum):
    """What the unit is currently doing."""

    INACTIVE = "inactive"
    IDLE = "idle"
    COOLING = "cooling"
    HEATING = "heating"


class TargetMode(StrEnum):
    """Mode the unit has been asked to run in."""

    AUTO = "auto"
    COOL = "cool"
    HEAT = "heat"


@dataclass
class ClimateState:
    """Snapshot of the unit's state."""

    power: PowerState
    operating_mode: OperatingMode
    target_mode: TargetMode
    current_temperature: float
    threshold_temperature: float
    humidity: float
