"""Join observed usage with declared resources and roll them up per node."""

from __future__ import annotations

import logging
from collections import defaultdict

from kubeusage.models.core.pod_info import PodSpec, PodUsage
from kubeusage.models.core.quantity import ResourceList, sum_resource_lists
from kubeusage.models.report.report_data import (
    ClusterSnapshot,
    ContainerResourceRow,
    NodeResourceRow,
    NodeResourceTotals,
    ResourceReport,
)

logger = logging.getLogger(__name__)


class ResourceAggregator:
    """Correlates one ClusterSnapshot into container rows and node totals.

    Containers are paired with their declared spec by name within the same
    pod. Requests and limits are summed per node using the pod spec's node
    name, since usage records carry no node association.
    """

    def __init__(
        self,
        snapshot: ClusterSnapshot,
        *,
        namespace: str = "",
        include_pods_without_metrics: bool = False,
    ) -> None:
        self.snapshot = snapshot
        self.namespace = namespace
        self.include_pods_without_metrics = include_pods_without_metrics

    def _observed_rows(
        self, pod_usage: PodUsage, pod_spec: PodSpec | None
    ) -> list[ContainerResourceRow]:
        if pod_spec is None:
            logger.debug(
                "No declared spec for pod %s/%s", pod_usage.namespace, pod_usage.name
            )

        rows: list[ContainerResourceRow] = []
        for container in pod_usage.containers:
            container_spec = (
                pod_spec.find_container(container.name) if pod_spec else None
            )
            if pod_spec is not None and container_spec is None:
                logger.debug(
                    "No declared spec for container %s in pod %s/%s",
                    container.name,
                    pod_usage.namespace,
                    pod_usage.name,
                )
            rows.append(
                ContainerResourceRow(
                    namespace=pod_usage.namespace,
                    pod_name=pod_usage.name,
                    container_name=container.name,
                    node_name=pod_spec.node_name if pod_spec else "",
                    usage=container.usage,
                    requests=container_spec.requests if container_spec else None,
                    limits=container_spec.limits if container_spec else None,
                )
            )
        return rows

    @staticmethod
    def _unmetered_rows(pod_spec: PodSpec) -> list[ContainerResourceRow]:
        return [
            ContainerResourceRow(
                namespace=pod_spec.namespace,
                pod_name=pod_spec.name,
                container_name=container.name,
                node_name=pod_spec.node_name,
                usage=None,
                requests=container.requests,
                limits=container.limits,
            )
            for container in pod_spec.containers
        ]

    def build_container_rows(self) -> list[ContainerResourceRow]:
        """One row per observed (pod, container), sorted by namespace and pod.

        Containers keep their observed order within a pod.
        """
        rows: list[ContainerResourceRow] = []
        for key in sorted(self.snapshot.pod_usage):
            rows.extend(
                self._observed_rows(
                    self.snapshot.pod_usage[key], self.snapshot.pod_specs.get(key)
                )
            )

        if self.include_pods_without_metrics:
            for key in sorted(self.snapshot.pod_specs):
                if key in self.snapshot.pod_usage:
                    continue
                pod_spec = self.snapshot.pod_specs[key]
                if self.namespace and pod_spec.namespace != self.namespace:
                    continue
                rows.extend(self._unmetered_rows(pod_spec))
            rows.sort(key=lambda row: (row.namespace, row.pod_name))
        return rows

    def build_node_totals(
        self, rows: list[ContainerResourceRow] | None = None
    ) -> dict[str, NodeResourceTotals]:
        """Sum declared requests and limits per node.

        Every node in the node-usage mapping gets an entry, with zero totals
        when nothing is scheduled to it. Rows without a declared spec or
        without a node contribute nothing.
        """
        if rows is None:
            rows = self.build_container_rows()

        requests_by_node: dict[str, list[ResourceList]] = defaultdict(list)
        limits_by_node: dict[str, list[ResourceList]] = defaultdict(list)
        for row in rows:
            if not row.has_spec or not row.node_name:
                continue
            requests_by_node[row.node_name].append(row.requests or ResourceList())
            limits_by_node[row.node_name].append(row.limits or ResourceList())

        node_names = set(self.snapshot.node_usage) | set(requests_by_node)
        return {
            name: NodeResourceTotals(
                node_name=name,
                requests=sum_resource_lists(requests_by_node.get(name, [])),
                limits=sum_resource_lists(limits_by_node.get(name, [])),
                container_count=len(requests_by_node.get(name, [])),
            )
            for name in node_names
        }

    def build_node_rows(
        self, totals: dict[str, NodeResourceTotals]
    ) -> list[NodeResourceRow]:
        """One row per node with observed usage, sorted by node name."""
        rows: list[NodeResourceRow] = []
        for name in sorted(self.snapshot.node_usage):
            node_totals = totals.get(name) or NodeResourceTotals(node_name=name)
            node_spec = self.snapshot.node_specs.get(name)
            rows.append(
                NodeResourceRow(
                    node_name=name,
                    usage=self.snapshot.node_usage[name].usage,
                    allocatable=node_spec.allocatable if node_spec else None,
                    requests=node_totals.requests,
                    limits=node_totals.limits,
                )
            )
        return rows

    def build(self) -> ResourceReport:
        """Correlate and aggregate the snapshot into a ResourceReport."""
        container_rows = self.build_container_rows()
        totals = self.build_node_totals(container_rows)
        report = ResourceReport(
            container_rows=container_rows,
            node_rows=self.build_node_rows(totals),
            failures=dict(self.snapshot.failures),
        )
        logger.debug(
            "Built report with %d container rows and %d node rows",
            len(report.container_rows),
            len(report.node_rows),
        )
        return report
