"""Report settings models."""

import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from kubeusage.constants.defaults import (
    CONTEXT_DEFAULT,
    INCLUDE_PODS_WITHOUT_METRICS_DEFAULT,
    KUBECONFIG_DEFAULT_PATH,
    KUBECONFIG_ENV_VAR,
    MAX_NAME_LENGTH_DEFAULT,
    NAMESPACE_DEFAULT,
)
from kubeusage.constants.timeouts import CLUSTER_REQUEST_TIMEOUT
from kubeusage.utils.duration_parser import parse_duration_seconds


def resolve_kubeconfig_path() -> str:
    """Return $KUBECONFIG when set, else the default kubeconfig location."""
    return os.environ.get(KUBECONFIG_ENV_VAR) or str(KUBECONFIG_DEFAULT_PATH)


class ReportSettings(BaseModel):
    """Report settings model with validation."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    # Cluster access
    kubeconfig: str = Field(default_factory=resolve_kubeconfig_path)
    context: str = CONTEXT_DEFAULT  # empty = current context
    request_timeout: str = CLUSTER_REQUEST_TIMEOUT

    # Scope
    namespace: str = NAMESPACE_DEFAULT  # empty = all namespaces
    include_pods_without_metrics: bool = INCLUDE_PODS_WITHOUT_METRICS_DEFAULT

    # Display
    max_name_length: int = Field(default=MAX_NAME_LENGTH_DEFAULT, ge=2)

    @field_validator("request_timeout")
    @classmethod
    def validate_request_timeout(cls, value: str) -> str:
        """Reject timeouts kubectl would not accept."""
        parse_duration_seconds(value)
        return value.strip()

    @property
    def kubeconfig_path(self) -> Path:
        return Path(self.kubeconfig).expanduser()


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when settings fail to load."""
