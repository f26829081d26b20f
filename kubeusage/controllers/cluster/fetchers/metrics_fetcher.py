"""Metrics fetcher for cluster controller - reads the metrics.k8s.io API."""

from __future__ import annotations

import json
import logging
from typing import Any

from kubeusage.constants.timeouts import CLUSTER_REQUEST_TIMEOUT
from kubeusage.constants.values import METRICS_API_PATH

logger = logging.getLogger(__name__)


class MetricsFetcher:
    """Fetches node and pod usage from the resource metrics API."""

    def __init__(self, run_kubectl_func: Any) -> None:
        """Initialize with kubectl runner function.

        Args:
            run_kubectl_func: Async function to run kubectl commands
        """
        self._run_kubectl = run_kubectl_func

    @staticmethod
    def _pod_metrics_path(namespace: str | None) -> str:
        if namespace:
            return f"{METRICS_API_PATH}/namespaces/{namespace}/pods"
        return f"{METRICS_API_PATH}/pods"

    async def _fetch_items(self, path: str, request_timeout: str) -> list[dict[str, Any]]:
        output = await self._run_kubectl(
            ("get", "--raw", path, f"--request-timeout={request_timeout}")
        )
        if not output:
            return []

        try:
            data = json.loads(output)
        except json.JSONDecodeError:
            logger.warning("Error parsing metrics JSON from %s", path)
            raise

        items = data.get("items") or []
        logger.debug("Fetched %d metrics items from %s", len(items), path)
        return items

    async def fetch_node_metrics_raw(
        self,
        request_timeout: str | None = None,
    ) -> list[dict[str, Any]]:
        """Fetch raw NodeMetrics items for every node."""
        return await self._fetch_items(
            f"{METRICS_API_PATH}/nodes",
            request_timeout or CLUSTER_REQUEST_TIMEOUT,
        )

    async def fetch_pod_metrics_raw(
        self,
        *,
        namespace: str | None = None,
        request_timeout: str | None = None,
    ) -> list[dict[str, Any]]:
        """Fetch raw PodMetrics items for all namespaces or a single namespace."""
        return await self._fetch_items(
            self._pod_metrics_path(namespace),
            request_timeout or CLUSTER_REQUEST_TIMEOUT,
        )
