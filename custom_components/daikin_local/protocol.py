"""Daikin local HTTP protocol codec.

Responses are comma separated ``key=value`` tokens with no escaping, e.g.
``ret=OK,pow=1,mode=3,stemp=26.0``. Control writes must carry the full
parameter set as a query string, even when a single value changes.
"""

from __future__ import annotations

from collections.abc import Mapping

BASIC_INFO_PATH = "/common/basic_info"
CONTROL_INFO_PATH = "/aircon/get_control_info"
SENSOR_INFO_PATH = "/aircon/get_sensor_info"
SET_CONTROL_INFO_PATH = "/aircon/set_control_info"

# Key order of a control write; the device expects exactly this sequence.
CONTROL_QUERY_KEYS = (
    "pow",
    "f_dir_ud",
    "mode",
    "shum",
    "f_dir_lr",
    "f_rate",
    "stemp",
)

RET_OK = "OK"


def parse_response(body: str | None) -> dict[str, str]:
    """Convert a device response body into a parameter mapping."""
    params: dict[str, str] = {}
    if not body:
        return params

    for segment in body.split(","):
        if not segment:
            continue
        key, _, value = segment.partition("=")
        params[key] = value
    return params


def build_query(params: Mapping[str, str]) -> str:
    """Render the control write query for a parameter mapping.

    Keys missing from ``params`` are sent with an empty value.
    """
    return "&".join(f"{key}={params.get(key, '')}" for key in CONTROL_QUERY_KEYS)


def format_temperature(value: float) -> str:
    """Render a setpoint the way the device reports it back."""
    return f"{value:g}"
