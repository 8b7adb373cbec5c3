"""Config settings – SettingsLoader port and EnvSettingsLoader."""
from __future__ import annotations

import abc
import dataclasses
import json
import os
from typing import Any, Mapping, TypeVar

from kv_keystore.config.settings.base import Settings
from kv_keystore.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

T = TypeVar("T", bound=Settings)


class SettingsLoader(abc.ABC):
    """Port: load settings from an external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...

    def values(self, settings_class: type[Settings]) -> dict[str, Any]:
        """Return the field values this source provides, without validating them."""
        return self.load(settings_class).as_dict()


class EnvSettingsLoader(SettingsLoader):
    """Load settings from environment variables named ``{PREFIX}_{FIELD}``.

    Booleans accept ``1/true/yes/on``; ``dict`` fields take a JSON object.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    def values(self, settings_class: type[Settings]) -> dict[str, Any]:
        environ = self._environ if self._environ is not None else os.environ
        prefix = getattr(settings_class, "_prefix", "").upper()
        found: dict[str, Any] = {}
        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            env_key = f"{prefix}_{field.name}".upper().lstrip("_")
            raw = environ.get(env_key)
            if raw is not None:
                found[field.name] = self._coerce(env_key, raw, field.type)
        return found

    def load(self, settings_class: type[T]) -> T:
        prefix = getattr(settings_class, "_prefix", "").upper()
        kwargs = self.values(settings_class)

        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            if field.name in kwargs:
                continue
            if (
                field.default is dataclasses.MISSING
                and field.default_factory is dataclasses.MISSING  # type: ignore[misc]
            ):
                raise MissingRequiredSettingError(f"{prefix}_{field.name}".upper().lstrip("_"))

        try:
            return settings_class(**kwargs)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Failed to load settings: {exc}", cause=exc) from exc

    def _coerce(self, name: str, value: str, type_hint: Any) -> Any:  # noqa: PLR0911
        hint = type_hint if isinstance(type_hint, str) else getattr(type_hint, "__name__", str(type_hint))
        if type_hint is bool or hint == "bool":
            return value.strip().lower() in ("1", "true", "yes", "on")
        if type_hint is int or hint == "int":
            try:
                return int(value)
            except ValueError as exc:
                raise InvalidSettingValueError(name, value, "not an integer") from exc
        if hint.startswith("dict"):
            try:
                parsed = json.loads(value)
            except ValueError as exc:
                raise InvalidSettingValueError(name, value, "not a JSON object") from exc
            if not isinstance(parsed, dict):
                raise InvalidSettingValueError(name, value, "not a JSON object")
            return parsed
        return value


__all__ = ["EnvSettingsLoader", "SettingsLoader"]
