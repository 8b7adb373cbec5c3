"""Config settings – SettingsFactory."""
from __future__ import annotations

import dataclasses
import logging
from typing import Any, Sequence, TypeVar

from kv_keystore.config.settings.base import Settings
from kv_keystore.config.settings.loaders import SettingsLoader
from kv_keystore.config.validation.errors import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

T = TypeVar("T", bound=Settings)

logger = logging.getLogger(__name__)


class SettingsFactory:
    """Merge outputs from multiple loaders, apply overrides, and construct
    a settings dataclass in one step.

    Loaders are applied in order; later loaders override earlier ones for
    overlapping fields. *overrides* take the highest priority. A loader that
    fails to load is skipped so the remaining sources may still contribute
    values; a value a loader rejects as invalid
    (:class:`InvalidSettingValueError`) propagates.
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
            The :class:`~kv_keystore.config.settings.base.Settings` subclass to
            construct.
        loaders:
            Ordered sources. Later loaders win on field conflicts.
        overrides:
            Explicit key-value pairs applied after all loaders.

        Raises
        ------
        MissingRequiredSettingError
            When a required field is absent after all sources have been merged.
        ConfigError
            When a loader rejects a value, or the merged values fail the
            settings class' validation.
        """
        merged: dict[str, Any] = {}

        for loader in loaders or []:
            try:
                merged.update(loader.values(settings_cls))
            except InvalidSettingValueError:
                raise
            except Exception as exc:  # noqa: BLE001 – skip failing loaders
                logger.debug("settings.loader_skipped loader=%s exc=%r", type(loader).__name__, exc)

        if overrides:
            merged.update(overrides)

        for field in dataclasses.fields(settings_cls):  # type: ignore[arg-type]
            if field.name in merged:
                continue
            if (
                field.default is dataclasses.MISSING
                and field.default_factory is dataclasses.MISSING  # type: ignore[misc]
            ):
                raise MissingRequiredSettingError(field.name)

        try:
            return settings_cls(**merged)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Failed to construct {settings_cls.__name__}: {exc}", cause=exc) from exc


__all__ = ["SettingsFactory"]
