"""Settings loading from an optional YAML file plus command-line overrides."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from kubeusage.models.state.app_settings import (
    ConfigError,
    ConfigLoadError,
    ReportSettings,
)

logger = logging.getLogger(__name__)

__all__ = [
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
    "ReportSettings",
]


class ConfigManager:
    """Builds validated ReportSettings.

    Precedence (highest first): explicit overrides, settings file, defaults.
    """

    def __init__(self, config_path: Path | str | None = None) -> None:
        self.config_path = Path(config_path).expanduser() if config_path else None

    def _read_file(self) -> dict[str, Any]:
        if self.config_path is None:
            return {}
        try:
            with self.config_path.open(encoding="utf-8") as handle:
                data = yaml.safe_load(handle)
        except OSError as exc:
            raise ConfigLoadError(
                f"unable to read settings file {self.config_path}: {exc}"
            ) from exc
        except yaml.YAMLError as exc:
            raise ConfigLoadError(
                f"invalid YAML in settings file {self.config_path}: {exc}"
            ) from exc

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigLoadError(
                f"settings file {self.config_path} must contain a mapping"
            )
        logger.debug("Loaded settings from %s", self.config_path)
        return data

    def load(self, overrides: Mapping[str, Any] | None = None) -> ReportSettings:
        """Load settings and verify the kubeconfig file exists.

        Args:
            overrides: Values that take precedence over the file. Keys whose
                value is None are ignored.

        Raises:
            ConfigLoadError: If the file is unreadable, invalid, or the
                resolved kubeconfig does not exist.
        """
        values = self._read_file()
        values.update(
            {key: value for key, value in (overrides or {}).items() if value is not None}
        )

        try:
            settings = ReportSettings(**values)
        except ValidationError as exc:
            raise ConfigLoadError(f"invalid settings: {exc}") from exc

        if not settings.kubeconfig_path.is_file():
            raise ConfigLoadError(
                f"kubeconfig not found at {settings.kubeconfig_path}"
            )
        return settings
