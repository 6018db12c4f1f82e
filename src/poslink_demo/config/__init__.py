"""Connection parameters and the settings editor form."""

from poslink_demo.config.parameters import ConnectionParameters, ParameterStore
from poslink_demo.config.settings_form import SettingsForm, parse_int, parse_timeout

__all__ = [
    "ConnectionParameters",
    "ParameterStore",
    "SettingsForm",
    "parse_int",
    "parse_timeout",
]
