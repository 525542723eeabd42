"""Config settings – 12-factor env-based configuration."""
from matchday_relay.config.settings.base import RelaySettings, Settings
from matchday_relay.config.settings.factory import SettingsFactory
from matchday_relay.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from matchday_relay.config.settings.validator import SettingsValidator

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "RelaySettings",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
    "SettingsValidator",
]
