"""Parsers for cluster controller."""

from kubeusage.controllers.cluster.parsers.node_parser import NodeParser
from kubeusage.controllers.cluster.parsers.pod_parser import PodParser

__all__ = ["NodeParser", "PodParser"]
