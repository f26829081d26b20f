"""Snapshot and report models."""

from kubeusage.models.report.report_data import (
    ClusterSnapshot,
    ContainerResourceRow,
    NodeResourceRow,
    NodeResourceTotals,
    ResourceReport,
)

__all__ = [
    "ClusterSnapshot",
    "ContainerResourceRow",
    "NodeResourceRow",
    "NodeResourceTotals",
    "ResourceReport",
]
