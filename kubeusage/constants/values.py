"""Scalar constants for the report.

All application-level constants with proper type hints using Final.
"""

from typing import Final

# ============================================================================
# Application
# ============================================================================

APP_NAME: Final = "kubeusage"

# ============================================================================
# Resource names
# ============================================================================

RESOURCE_CPU: Final = "cpu"
RESOURCE_MEMORY: Final = "memory"

# ============================================================================
# Table headers
# ============================================================================

POD_TABLE_HEADERS: Final = (
    "Namespace",
    "Pod",
    "Container",
    "Usage",
    "Requests",
    "Limits",
)
NODE_TABLE_HEADERS: Final = (
    "Node",
    "Usage",
    "Allocatable",
    "Resource Requests",
    "Resource Limits",
)

# ============================================================================
# Display
# ============================================================================

MISSING_VALUE: Final = "-"
TRUNCATION_MARKER: Final = "..."

# ============================================================================
# Metrics API
# ============================================================================

METRICS_API_PATH: Final = "/apis/metrics.k8s.io/v1beta1"

__all__ = [
    "APP_NAME",
    "METRICS_API_PATH",
    "MISSING_VALUE",
    "NODE_TABLE_HEADERS",
    "POD_TABLE_HEADERS",
    "RESOURCE_CPU",
    "RESOURCE_MEMORY",
    "TRUNCATION_MARKER",
]
