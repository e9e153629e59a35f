"""Constants for Daikin Local integration."""

DOMAIN = "daikin_local"
CONF_COOLING_HEATING_THRESHOLD = "cooling_heating_threshold"
CONF_REFRESH_RATE = "refresh_rate"

DEFAULT_HOST = "http://localhost"
DEFAULT_NAME = "test"
DEFAULT_COOLING_HEATING_THRESHOLD = 25
DEFAULT_REFRESH_RATE = 60
DEFAULT_TIMEOUT = 10

# Setpoint limits accepted by the device per mode.
COOLING_MIN_TEMP = 18
COOLING_MAX_TEMP = 32
HEATING_MIN_TEMP = 15
HEATING_MAX_TEMP = 30
TEMPERATURE_STEP = 1
