"""Fetchers for cluster controller."""

from kubeusage.controllers.cluster.fetchers.metrics_fetcher import MetricsFetcher
from kubeusage.controllers.cluster.fetchers.node_fetcher import NodeFetcher
from kubeusage.controllers.cluster.fetchers.pod_fetcher import PodFetcher

__all__ = ["MetricsFetcher", "NodeFetcher", "PodFetcher"]
