"""Process-wide settings for rulechain.

Settings are few: the reference date used by card expiration checks (so tests
and batch jobs can pin "today") and whether raised validation failures are
logged. They can be supplied as keyword overrides, a mapping, YAML text or
environment variables.

Example:
    ```python
    from rulechain.settings import configure, load_settings_yaml

    configure(reference_date="2024-03-01")
    load_settings_yaml("reference_date: 2024-03-01\\nlog_failures: false")
    ```
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields, replace
from datetime import date
from typing import IO, Any, Mapping

import yaml

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

ENV_PREFIX = "RULECHAIN_"


@dataclass(frozen=True)
class ValidatorSettings:
    """Immutable settings snapshot.

    Attributes:
        reference_date: Date treated as "today"; None means the system date
        log_failures: Emit a debug log record whenever ``validate`` raises
    """

    reference_date: date | None = None
    log_failures: bool = True

    def today(self) -> date:
        return self.reference_date or date.today()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ValidatorSettings:
        """Build settings from a mapping, ignoring unknown keys."""
        return cls().merged(data)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ValidatorSettings:
        """Build settings from ``RULECHAIN_*`` environment variables."""
        environ = os.environ if environ is None else environ
        data = {}
        for field_def in fields(cls):
            key = f"{ENV_PREFIX}{field_def.name.upper()}"
            if key in environ:
                data[field_def.name] = environ[key]
        return cls.from_dict(data)

    def merged(self, data: Mapping[str, Any]) -> ValidatorSettings:
        known = {f.name for f in fields(self)}
        overrides = {}
        for key, value in data.items():
            if key not in known:
                logger.warning(f"Unknown rulechain setting: {key}")
                continue
            overrides[key] = _coerce(key, value)
        return replace(self, **overrides)


def _coerce(key: str, value: Any) -> Any:
    if key == "reference_date":
        if value is None or isinstance(value, date):
            return value
        try:
            return date.fromisoformat(str(value))
        except ValueError as e:
            raise ConfigurationError(
                f"Invalid reference_date: {value}", context={"setting": key, "value": value}
            ) from e
    if key == "log_failures":
        if isinstance(value, str):
            return value.strip().lower() in ("1", "true", "yes", "on")
        return bool(value)
    return value


class SettingsManager:
    """Holds the active ``ValidatorSettings``."""

    def __init__(self) -> None:
        self._settings = ValidatorSettings()

    def get_settings(self) -> ValidatorSettings:
        return self._settings

    def configure(self, **overrides: Any) -> ValidatorSettings:
        self._settings = self._settings.merged(overrides)
        return self._settings

    def load_settings(self, data: Mapping[str, Any]) -> ValidatorSettings:
        """Merge a settings mapping over the active settings."""
        if not isinstance(data, Mapping):
            raise ConfigurationError(
                "Settings must be a mapping", context={"type": type(data).__name__}
            )
        return self.configure(**data)

    def load_settings_yaml(self, source: str | IO[str]) -> ValidatorSettings:
        """Merge settings parsed from YAML text or an open text stream."""
        data = yaml.safe_load(source) or {}
        return self.load_settings(data)

    def reset(self) -> None:
        self._settings = ValidatorSettings()


_manager = SettingsManager()


def get_settings() -> ValidatorSettings:
    return _manager.get_settings()


def configure(**overrides: Any) -> ValidatorSettings:
    return _manager.configure(**overrides)


def load_settings(data: Mapping[str, Any]) -> ValidatorSettings:
    return _manager.load_settings(data)


def load_settings_yaml(source: str | IO[str]) -> ValidatorSettings:
    return _manager.load_settings_yaml(source)


def reset_settings() -> None:
    _manager.reset()


def today() -> date:
    """The date expiration checks compare against."""
    return _manager.get_settings().today()
