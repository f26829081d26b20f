"""Constants module for kubeusage.

Centralized constants organized by domain:
- enums.py: All Enum class definitions
- values.py: Scalar constants (strings, headers with Final)
- timeouts.py: Timeout values (seconds)
- defaults.py: Default values for settings
"""

from kubeusage.constants.defaults import (
    CONTEXT_DEFAULT,
    INCLUDE_PODS_WITHOUT_METRICS_DEFAULT,
    KUBECONFIG_DEFAULT_PATH,
    KUBECONFIG_ENV_VAR,
    MAX_NAME_LENGTH_DEFAULT,
    NAMESPACE_DEFAULT,
)
from kubeusage.constants.enums import FetchSource, QuantityFormat
from kubeusage.constants.timeouts import (
    CLUSTER_CHECK_TIMEOUT,
    CLUSTER_REQUEST_TIMEOUT,
    KUBECTL_COMMAND_TIMEOUT,
)
from kubeusage.constants.values import (
    APP_NAME,
    METRICS_API_PATH,
    MISSING_VALUE,
    NODE_TABLE_HEADERS,
    POD_TABLE_HEADERS,
    RESOURCE_CPU,
    RESOURCE_MEMORY,
    TRUNCATION_MARKER,
)

__all__ = [
    "APP_NAME",
    "CLUSTER_CHECK_TIMEOUT",
    "CLUSTER_REQUEST_TIMEOUT",
    "CONTEXT_DEFAULT",
    "INCLUDE_PODS_WITHOUT_METRICS_DEFAULT",
    "KUBECONFIG_DEFAULT_PATH",
    "KUBECONFIG_ENV_VAR",
    "KUBECTL_COMMAND_TIMEOUT",
    "MAX_NAME_LENGTH_DEFAULT",
    "METRICS_API_PATH",
    "MISSING_VALUE",
    "NAMESPACE_DEFAULT",
    "NODE_TABLE_HEADERS",
    "POD_TABLE_HEADERS",
    "RESOURCE_CPU",
    "RESOURCE_MEMORY",
    "TRUNCATION_MARKER",
    "FetchSource",
    "QuantityFormat",
]
