"""Shared fixtures for Daikin Local tests."""

from __future__ import annotations

import pytest

from custom_components.daikin_local.daikin_client import DaikinClient
from custom_components.daikin_local.protocol import (
    BASIC_INFO_PATH,
    CONTROL_INFO_PATH,
    SENSOR_INFO_PATH,
    SET_CONTROL_INFO_PATH,
    parse_response,
)

CONTROL_INFO = (
    "ret=OK,pow=1,mode=3,adv=,stemp=26.0,shum=0,dt1=25.0,dt2=M,dt3=26.0,"
    "dt4=22.0,dt5=22.0,dt7=25.0,dh1=AUTO,dh2=50,dh3=0,dh4=0,dh5=0,dh7=AUTO,"
    "dhh=50,b_mode=3,b_stemp=26.0,b_shum=0,alert=255,f_rate=A,f_dir=0,"
    "b_f_rate=A,b_f_dir=0,dfr1=5,dfr2=5,dfr3=A,dfr4=5,dfr5=5,dfr6=5,dfr7=5,"
    "dfrh=5,dfd1=0,dfd2=0,dfd3=0,dfd4=0,dfd5=0,dfd6=0,dfd7=0,dfdh=0,"
    "f_dir_ud=0,f_dir_lr=0"
)
SENSOR_INFO = "ret=OK,htemp=24.0,hhum=45,otemp=18.0,err=0,cmpfreq=0"
BASIC_INFO = "ret=OK,type=aircon,reg=jp,dst=1,ver=1_2_51,pow=1,err=0,name=%e3%83%aa"


class FakeTransport:
    """Transport double answering from canned bodies and recording paths."""

    host = "http://192.0.2.10"

    def __init__(self, responses: dict[str, str] | None = None) -> None:
        self.responses = {
            BASIC_INFO_PATH: BASIC_INFO,
            CONTROL_INFO_PATH: CONTROL_INFO,
            SENSOR_INFO_PATH: SENSOR_INFO,
        }
        if responses:
            self.responses.update(responses)
        self.write_response = "ret=OK"
        self.error: Exception | None = None
        self.requests: list[str] = []

    async def get(self, path: str) -> str:
        self.requests.append(path)
        if self.error is not None:
            raise self.error
        if path.startswith(SET_CONTROL_INFO_PATH):
            return self.write_response
        return self.responses.get(path, "")

    @property
    def writes(self) -> list[dict[str, str]]:
        """Return the parameters of every control write, in order."""
        return [
            parse_response(path.partition("?")[2].replace("&", ","))
            for path in self.requests
            if path.startswith(SET_CONTROL_INFO_PATH)
        ]


@pytest.fixture
def transport() -> FakeTransport:
    """Return a fake transport with a cooling unit at 24 degrees."""
    return FakeTransport()


@pytest.fixture
def client(transport: FakeTransport) -> DaikinClient:
    """Return a client bound to the fake transport."""
    return DaikinClient(transport, name="Living room", cooling_heating_threshold=25)
