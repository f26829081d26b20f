"""Node parser for cluster controller - parses node data into structured formats."""

from __future__ import annotations

from typing import Any

from kubeusage.models.core.node_info import NodeSpec, NodeUsage
from kubeusage.models.core.quantity import ResourceList


class NodeParser:
    """Parses node objects and node metrics into models."""

    @staticmethod
    def _node_name(item: dict[str, Any]) -> str:
        return str((item.get("metadata") or {}).get("name", "") or "")

    def parse_node_spec(self, node: dict[str, Any]) -> NodeSpec:
        """Parse a single node object into NodeSpec.

        Args:
            node: Raw node dictionary from the core API

        Returns:
            NodeSpec with allocatable and capacity resource lists.
        """
        status = node.get("status") or {}
        return NodeSpec(
            name=self._node_name(node),
            allocatable=ResourceList.from_raw(status.get("allocatable")),
            capacity=ResourceList.from_raw(status.get("capacity")),
        )

    def parse_node_usage(self, metrics: dict[str, Any]) -> NodeUsage:
        """Parse a single NodeMetrics item into NodeUsage."""
        return NodeUsage(
            name=self._node_name(metrics),
            usage=ResourceList.from_raw(metrics.get("usage")),
        )

    def parse_node_specs(self, nodes: list[dict[str, Any]]) -> dict[str, NodeSpec]:
        """Parse node objects into a name-keyed mapping, skipping unnamed items."""
        specs: dict[str, NodeSpec] = {}
        for node in nodes:
            spec = self.parse_node_spec(node)
            if spec.name:
                specs[spec.name] = spec
        return specs

    def parse_node_usages(self, items: list[dict[str, Any]]) -> dict[str, NodeUsage]:
        """Parse NodeMetrics items into a name-keyed mapping, skipping unnamed items."""
        usages: dict[str, NodeUsage] = {}
        for item in items:
            usage = self.parse_node_usage(item)
            if usage.name:
                usages[usage.name] = usage
        return usages
