"""Config validation errors."""
from matchday_relay.config.validation.errors import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
    env_var_name,
)

__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError", "env_var_name"]
