"""Init file for cluster module."""

from kubeusage.controllers.cluster.fetchers import (
    MetricsFetcher,
    NodeFetcher,
    PodFetcher,
)
from kubeusage.controllers.cluster.parsers import NodeParser, PodParser

__all__ = ["MetricsFetcher", "NodeFetcher", "NodeParser", "PodFetcher", "PodParser"]
