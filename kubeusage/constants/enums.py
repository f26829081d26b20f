"""All enum definitions for the report.

This module consolidates all enumerations used throughout the application.
"""

from enum import Enum

# =============================================================================
# Fetch Source Enums
# =============================================================================

class FetchSource(Enum):
    """Data source identifiers for the four per-cycle retrievals."""

    NODE_METRICS = "node_metrics"
    NODE_RESOURCES = "node_resources"
    POD_METRICS = "pod_metrics"
    POD_RESOURCES = "pod_resources"


# =============================================================================
# Quantity Enums
# =============================================================================

class QuantityFormat(Enum):
    """Canonical string format of a resource quantity."""

    DECIMAL_SI = "DecimalSI"
    BINARY_SI = "BinarySI"
    DECIMAL_EXPONENT = "DecimalExponent"


__all__ = [
    "FetchSource",
    "QuantityFormat",
]
