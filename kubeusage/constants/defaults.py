"""Default values for settings.

All default values used in the ReportSettings model.
"""

from pathlib import Path
from typing import Final

# ============================================================================
# Kubeconfig resolution
# ============================================================================

KUBECONFIG_ENV_VAR: Final = "KUBECONFIG"
KUBECONFIG_DEFAULT_PATH: Final = Path.home() / ".kube" / "config"

# ============================================================================
# Report defaults
# ============================================================================

CONTEXT_DEFAULT: Final = ""
NAMESPACE_DEFAULT: Final = ""
MAX_NAME_LENGTH_DEFAULT: Final = 30
INCLUDE_PODS_WITHOUT_METRICS_DEFAULT: Final = False

__all__ = [
    "CONTEXT_DEFAULT",
    "INCLUDE_PODS_WITHOUT_METRICS_DEFAULT",
    "KUBECONFIG_DEFAULT_PATH",
    "KUBECONFIG_ENV_VAR",
    "MAX_NAME_LENGTH_DEFAULT",
    "NAMESPACE_DEFAULT",
]
