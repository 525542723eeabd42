"""Config validation errors.

Every settings error names both the dataclass field and the environment
variable an operator sets to fix it (``retry_attempts`` -> ``MAKE_RETRY_ATTEMPTS``).
"""
from matchday_relay.kernel.errors import ConfigurationError

DEFAULT_PREFIX = "MAKE"


def env_var_name(setting_name: str, prefix: str = DEFAULT_PREFIX) -> str:
    """``("webhook_url", "MAKE")`` -> ``"MAKE_WEBHOOK_URL"``; no prefix -> bare name."""
    return f"{prefix}_{setting_name}".upper().lstrip("_")


class ConfigError(ConfigurationError):
    """Relay settings could not be loaded or failed their own checks."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A setting without a default was not supplied by any source."""
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str, *, prefix: str = DEFAULT_PREFIX) -> None:
        self.setting_name = setting_name
        self.env_var = env_var_name(setting_name, prefix)
        super().__init__(
            f"Relay setting '{setting_name}' is missing; set {self.env_var}",
            detail={"setting": setting_name, "env_var": self.env_var},
        )


class InvalidSettingValueError(ConfigError):
    """A relay setting is present but out of range (e.g. ``retry_attempts=0``)."""
    default_code = "invalid_setting_value"

    def __init__(
        self,
        setting_name: str,
        value: object,
        reason: str,
        *,
        prefix: str = DEFAULT_PREFIX,
    ) -> None:
        self.setting_name = setting_name
        self.value = value
        self.reason = reason
        self.env_var = env_var_name(setting_name, prefix)
        super().__init__(
            f"Relay setting '{setting_name}' ({self.env_var}) has invalid value {value!r}: {reason}",
            detail={"setting": setting_name, "env_var": self.env_var, "reason": reason},
        )


__all__ = [
    "ConfigError",
    "DEFAULT_PREFIX",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "env_var_name",
]
