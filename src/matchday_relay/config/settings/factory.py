"""Config settings – SettingsFactory."""
from __future__ import annotations

import dataclasses
from typing import Any, Sequence, TypeVar

from matchday_relay.config.settings.base import Settings
from matchday_relay.config.settings.loaders import SettingsLoader
from matchday_relay.config.validation.errors import (
    ConfigError,
    MissingRequiredSettingError,
)
from matchday_relay.observability.logging import get_logger

T = TypeVar("T", bound=Settings)
logger = get_logger(__name__)


class SettingsFactory:
    """Merge outputs from multiple loaders, apply overrides, and construct
    a settings dataclass in one step.

    Loaders are applied in order; later loaders override earlier ones for
    overlapping fields.  *overrides* (if provided) take the highest priority.
    A loader that raises is skipped (and logged) so that the remaining
    loaders may still contribute values.
    """

    @staticmethod
    def create(
        settings_cls: type[T],
        loaders: Sequence[SettingsLoader] | None = None,
        overrides: dict[str, Any] | None = None,
    ) -> T:
        """
        Parameters
        ----------
        settings_cls:
            The :class:`~matchday_relay.config.settings.base.Settings` subclass
            to construct.
        loaders:
            Ordered sequence of loaders.  Later loaders win on field conflicts.
        overrides:
            Explicit key-value pairs applied after all loaders, useful for
            tests and local development.

        Raises
        ------
        MissingRequiredSettingError
            When a required field (no default) is absent after all sources
            have been merged.
        InvalidSettingValueError
            When a value fails the settings class's own validation.
        ConfigError
            On any other construction failure.
        """
        merged: dict[str, Any] = {}

        for loader in loaders or []:
            try:
                instance = loader.load(settings_cls)
            except Exception as exc:  # noqa: BLE001 – skip failing loaders
                logger.warning(
                    "settings.loader_failed",
                    loader=type(loader).__name__,
                    error=str(exc),
                )
                continue
            for field in dataclasses.fields(instance):  # type: ignore[arg-type]
                value = getattr(instance, field.name)
                if value != _default_of(field):
                    merged[field.name] = value

        if overrides:
            merged.update(overrides)

        for field in dataclasses.fields(settings_cls):  # type: ignore[arg-type]
            if field.name in merged:
                continue
            if (
                field.default is dataclasses.MISSING
                and field.default_factory is dataclasses.MISSING  # type: ignore[misc]
            ):
                raise MissingRequiredSettingError(field.name, prefix=settings_cls._prefix)

        try:
            return settings_cls(**merged)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Failed to construct {settings_cls.__name__}: {exc}") from exc


def _default_of(field: dataclasses.Field[Any]) -> Any:
    if field.default is not dataclasses.MISSING:
        return field.default
    if field.default_factory is not dataclasses.MISSING:  # type: ignore[misc]
        return field.default_factory()  # type: ignore[misc]
    return dataclasses.MISSING


__all__ = ["SettingsFactory"]
