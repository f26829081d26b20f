"""Settings models."""

from kubeusage.models.state.app_settings import (
    ConfigError,
    ConfigLoadError,
    ReportSettings,
)
from kubeusage.models.state.config_manager import ConfigManager

__all__ = [
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
    "ReportSettings",
]
