"""Timeout constants.

All timeout values for API requests and kubectl subprocesses.
"""

from typing import Final

# ============================================================================
# API/Cluster timeouts (string format for kubectl)
# ============================================================================

CLUSTER_REQUEST_TIMEOUT: Final = "30s"

# Process-level command timeouts (must be greater than request timeout)
KUBECTL_COMMAND_TIMEOUT: Final = 45
KUBECTL_COMMAND_TIMEOUT_MIN: Final = 20

# ============================================================================
# Connection check
# ============================================================================

CLUSTER_CHECK_TIMEOUT: Final = 12

__all__ = [
    "CLUSTER_CHECK_TIMEOUT",
    "CLUSTER_REQUEST_TIMEOUT",
    "KUBECTL_COMMAND_TIMEOUT",
    "KUBECTL_COMMAND_TIMEOUT_MIN",
]
