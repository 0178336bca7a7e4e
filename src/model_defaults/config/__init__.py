"""Configuration home resolution and shared config types."""

from .loader import (
    CONFIG_TOML_FILE,
    HOME_ENV_VAR,
    HomeSettings,
    load_home_settings,
    resolve_config_path,
)
from .types import ReasoningEffort

__all__ = [
    "CONFIG_TOML_FILE",
    "HOME_ENV_VAR",
    "HomeSettings",
    "ReasoningEffort",
    "load_home_settings",
    "resolve_config_path",
]
