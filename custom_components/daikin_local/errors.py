"""Exceptions raised by the Daikin client."""

from __future__ import annotations


class DaikinError(Exception):
    """Base error for Daikin device communication."""


class DaikinTransportError(DaikinError):
    """The device could not be reached or answered with an HTTP error."""


class DeviceRejectedError(DaikinError):
    """The device answered a control write with a status other than OK."""

    def __init__(self, ret: str) -> None:
        """Initialize with the status string returned by the device."""
        super().__init__(ret)
        self.ret = ret
