"""Configuration – settings snapshot, loaders and the event catalog."""
from matchday_relay.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    RelaySettings,
    Settings,
    SettingsFactory,
    SettingsLoader,
    SettingsValidator,
)
from matchday_relay.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "RelaySettings",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
    "SettingsValidator",
]
