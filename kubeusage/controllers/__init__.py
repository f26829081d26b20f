"""Controllers module for kubeusage.

This module provides the controllers that fetch Kubernetes cluster data for
one report cycle.
"""

from __future__ import annotations

# Base classes
from kubeusage.controllers.base import BaseController, FetchResult

# Cluster domain
from kubeusage.controllers.cluster.controller import (
    KubectlError,
    ResourceUsageController,
)

__all__ = [
    "BaseController",
    "FetchResult",
    "KubectlError",
    "ResourceUsageController",
]
