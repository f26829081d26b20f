"""Join and aggregation of cluster snapshots."""

from kubeusage.analysis.aggregator import ResourceAggregator

__all__ = ["ResourceAggregator"]
