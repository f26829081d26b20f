"""Pod parser for cluster controller - parses pod data into structured formats."""

from __future__ import annotations

import logging
from typing import Any

from kubeusage.models.core.pod_info import (
    ContainerSpec,
    ContainerUsage,
    PodKey,
    PodSpec,
    PodUsage,
)
from kubeusage.models.core.quantity import ResourceList

logger = logging.getLogger(__name__)


class PodParser:
    """Parses pod objects and pod metrics into models."""

    @staticmethod
    def _metadata(item: dict[str, Any]) -> tuple[str, str]:
        metadata = item.get("metadata") or {}
        return (
            str(metadata.get("name", "") or ""),
            str(metadata.get("namespace", "") or ""),
        )

    def parse_pod_spec(self, pod: dict[str, Any]) -> PodSpec:
        """Parse a single pod object into PodSpec.

        Only regular containers are kept; init containers have no usage
        metrics to correlate with.
        """
        name, namespace = self._metadata(pod)
        spec = pod.get("spec") or {}
        containers = tuple(
            ContainerSpec(
                name=str(container.get("name", "")),
                requests=ResourceList.from_raw(
                    (container.get("resources") or {}).get("requests")
                ),
                limits=ResourceList.from_raw(
                    (container.get("resources") or {}).get("limits")
                ),
            )
            for container in spec.get("containers") or []
        )
        return PodSpec(
            name=name,
            namespace=namespace,
            node_name=str(spec.get("nodeName", "") or ""),
            containers=containers,
        )

    def parse_pod_usage(self, metrics: dict[str, Any]) -> PodUsage:
        """Parse a single PodMetrics item into PodUsage."""
        name, namespace = self._metadata(metrics)
        containers = tuple(
            ContainerUsage(
                name=str(container.get("name", "")),
                usage=ResourceList.from_raw(container.get("usage")),
            )
            for container in metrics.get("containers") or []
        )
        return PodUsage(name=name, namespace=namespace, containers=containers)

    def parse_pod_specs(self, pods: list[dict[str, Any]]) -> dict[PodKey, PodSpec]:
        """Parse pod objects into a (namespace, name)-keyed mapping."""
        specs: dict[PodKey, PodSpec] = {}
        for pod in pods:
            spec = self.parse_pod_spec(pod)
            if not spec.name:
                continue
            if spec.key in specs:
                logger.warning("Duplicate pod %s/%s; keeping last", *spec.key)
            specs[spec.key] = spec
        return specs

    def parse_pod_usages(self, items: list[dict[str, Any]]) -> dict[PodKey, PodUsage]:
        """Parse PodMetrics items into a (namespace, name)-keyed mapping."""
        usages: dict[PodKey, PodUsage] = {}
        for item in items:
            usage = self.parse_pod_usage(item)
            if usage.name:
                usages[usage.key] = usage
        return usages
