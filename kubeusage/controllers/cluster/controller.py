"""Cluster controller for resource usage reporting.

This module orchestrates one report cycle: it runs the four independent
retrievals (node metrics, node resources, pod metrics, pod resources)
concurrently, waits for all of them, and hands back a fresh ClusterSnapshot
with per-source outcomes.
"""

from __future__ import annotations

import asyncio
import logging
import math
import subprocess
import time
from collections.abc import Awaitable, Callable
from contextlib import suppress
from typing import Any

from kubeusage.constants.enums import FetchSource
from kubeusage.constants.timeouts import (
    CLUSTER_CHECK_TIMEOUT,
    KUBECTL_COMMAND_TIMEOUT,
    KUBECTL_COMMAND_TIMEOUT_MIN,
)
from kubeusage.controllers.base import BaseController, FetchResult
from kubeusage.controllers.cluster.fetchers import (
    MetricsFetcher,
    NodeFetcher,
    PodFetcher,
)
from kubeusage.controllers.cluster.parsers import NodeParser, PodParser
from kubeusage.models.core.node_info import NodeSpec, NodeUsage
from kubeusage.models.core.pod_info import PodKey, PodSpec, PodUsage
from kubeusage.models.report.report_data import ClusterSnapshot
from kubeusage.models.state.app_settings import ReportSettings
from kubeusage.utils.duration_parser import parse_duration_seconds

logger = logging.getLogger(__name__)


class KubectlError(RuntimeError):
    """Raised when a kubectl invocation fails, times out, or is unavailable."""


class ResourceUsageController(BaseController):
    """Cluster data operations with parallel fetching.

    Delegates to specialized fetchers and parsers:
    - NodeFetcher / NodeParser: node allocatable and capacity
    - PodFetcher / PodParser: pod container requests and limits
    - MetricsFetcher: node and pod usage from metrics.k8s.io
    """

    SOURCE_DESCRIPTIONS: dict[FetchSource, str] = {
        FetchSource.NODE_METRICS: "node metrics",
        FetchSource.NODE_RESOURCES: "node resources",
        FetchSource.POD_METRICS: "pod metrics",
        FetchSource.POD_RESOURCES: "pod resources",
    }

    @staticmethod
    def _request_timeout_seconds(request_timeout: str) -> int | None:
        """Parse a kubectl --request-timeout value into whole seconds.

        Returns None for zero (no request timeout) or unparseable values.
        """
        with suppress(ValueError):
            seconds = parse_duration_seconds(request_timeout)
            if seconds > 0:
                return max(1, math.ceil(seconds))
        return None

    @staticmethod
    def _summarize_kubectl_error(stderr: str) -> str:
        """Extract a concise, user-facing error from kubectl output."""
        lines = [line.strip() for line in stderr.splitlines() if line.strip()]
        if not lines:
            return "kubectl command failed"

        preferred_tokens = (
            "unable to connect to the server",
            "you must be logged in",
            "context deadline exceeded",
            "timed out",
            "certificate",
            "no such host",
            "forbidden",
            "unauthorized",
            "could not find the requested resource",
        )

        selected_line = lines[-1]
        for line in reversed(lines):
            lower_line = line.lower()
            if line.startswith("error:") or any(
                token in lower_line for token in preferred_tokens
            ):
                selected_line = line
                break

        cleaned = selected_line.removeprefix("error:").strip()
        if len(cleaned) > 160:
            return f"{cleaned[:157].rstrip()}..."
        return cleaned or "kubectl command failed"

    def __init__(self, settings: ReportSettings | None = None):
        """Initialize the controller.

        Args:
            settings: Report settings; kubeconfig, context, namespace and
                request timeout are taken from here.
        """
        self.settings = settings or ReportSettings()

        # Initialize fetchers
        self._node_fetcher = NodeFetcher(self._run_kubectl)
        self._pod_fetcher = PodFetcher(self._run_kubectl)
        self._metrics_fetcher = MetricsFetcher(self._run_kubectl)

        # Initialize parsers
        self._node_parser = NodeParser()
        self._pod_parser = PodParser()

    @property
    def namespace(self) -> str:
        return self.settings.namespace

    @property
    def context(self) -> str:
        return self.settings.context

    def _kubectl_timeout(self) -> int:
        """Process timeout for one kubectl call, above the request timeout."""
        request_seconds = self._request_timeout_seconds(self.settings.request_timeout)
        if request_seconds is None:
            return KUBECTL_COMMAND_TIMEOUT
        return max(KUBECTL_COMMAND_TIMEOUT_MIN, request_seconds + 10)

    def _build_kubectl_command(self, args: tuple[str, ...]) -> list[str]:
        cmd = ["kubectl", "--kubeconfig", str(self.settings.kubeconfig_path)]
        if self.context:
            cmd.extend(["--context", self.context])
        cmd.extend(args)
        return cmd

    def _run_kubectl_sync(
        self,
        args: tuple[str, ...],
        timeout: int | None = None,
    ) -> str:
        """Run a kubectl command synchronously (thread-safe wrapper target)."""
        cmd = self._build_kubectl_command(args)
        effective_timeout = timeout if timeout is not None else self._kubectl_timeout()
        logger.debug("Running %s", " ".join(cmd))
        try:
            result = subprocess.run(
                cmd, capture_output=True, text=True, timeout=effective_timeout
            )
        except FileNotFoundError as exc:
            raise KubectlError("kubectl executable not found on PATH") from exc
        except subprocess.TimeoutExpired as exc:
            raise KubectlError(
                f"kubectl timed out after {effective_timeout}s"
            ) from exc

        if result.returncode != 0:
            raise KubectlError(self._summarize_kubectl_error(result.stderr or ""))
        return result.stdout

    async def _run_kubectl(self, args: tuple[str, ...]) -> str:
        return await asyncio.to_thread(self._run_kubectl_sync, args)

    async def check_connection(self) -> bool:
        """Check if the API server is reachable."""
        try:
            await asyncio.to_thread(
                self._run_kubectl_sync,
                ("get", "--raw", "/version"),
                CLUSTER_CHECK_TIMEOUT,
            )
        except KubectlError as exc:
            logger.warning("Cluster connection check failed: %s", exc)
            return False
        return True

    async def fetch_node_usage(self) -> dict[str, NodeUsage]:
        """List observed usage for every node."""
        items = await self._metrics_fetcher.fetch_node_metrics_raw(
            request_timeout=self.settings.request_timeout
        )
        return self._node_parser.parse_node_usages(items)

    async def fetch_node_specs(self) -> dict[str, NodeSpec]:
        """List allocatable and capacity for every node."""
        items = await self._node_fetcher.fetch_nodes_raw(
            request_timeout=self.settings.request_timeout
        )
        return self._node_parser.parse_node_specs(items)

    async def fetch_pod_usage(self) -> dict[PodKey, PodUsage]:
        """List observed usage for pods in the configured namespace."""
        items = await self._metrics_fetcher.fetch_pod_metrics_raw(
            namespace=self.namespace or None,
            request_timeout=self.settings.request_timeout,
        )
        return self._pod_parser.parse_pod_usages(items)

    async def fetch_pod_specs(self) -> dict[PodKey, PodSpec]:
        """List declared resources for pods in all namespaces."""
        items = await self._pod_fetcher.fetch_pods_raw(
            request_timeout=self.settings.request_timeout
        )
        return self._pod_parser.parse_pod_specs(items)

    async def _run_source(
        self,
        source: FetchSource,
        fetch: Callable[[], Awaitable[Any]],
    ) -> FetchResult:
        """Run one retrieval and report its outcome instead of raising."""
        start = time.monotonic()
        try:
            data = await fetch()
        except Exception as exc:
            logger.debug("Retrieval of %s failed", source.value, exc_info=True)
            return FetchResult(
                success=False,
                error=f"unable to get {self.SOURCE_DESCRIPTIONS[source]}: {exc}",
                duration_ms=(time.monotonic() - start) * 1000,
            )
        return FetchResult(
            success=True,
            data=data,
            duration_ms=(time.monotonic() - start) * 1000,
        )

    async def fetch_all(self) -> ClusterSnapshot:
        """Fetch all four data sets concurrently and wait for every one.

        A failed retrieval leaves its mapping empty and is recorded in
        ClusterSnapshot.failures; it never aborts the other three.

        Returns:
            Fresh ClusterSnapshot for this cycle.
        """
        sources: list[tuple[FetchSource, Callable[[], Awaitable[Any]]]] = [
            (FetchSource.NODE_METRICS, self.fetch_node_usage),
            (FetchSource.NODE_RESOURCES, self.fetch_node_specs),
            (FetchSource.POD_METRICS, self.fetch_pod_usage),
            (FetchSource.POD_RESOURCES, self.fetch_pod_specs),
        ]
        results = await asyncio.gather(
            *(self._run_source(source, fetch) for source, fetch in sources)
        )

        data: dict[FetchSource, Any] = {}
        failures: dict[FetchSource, str] = {}
        for (source, _fetch), result in zip(sources, results):
            if not result.success:
                failures[source] = result.error or (
                    f"unable to get {self.SOURCE_DESCRIPTIONS[source]}"
                )
                logger.warning("%s", failures[source])
                continue
            data[source] = result.data
            logger.debug("Fetched %s in %.0f ms", source.value, result.duration_ms)

        return ClusterSnapshot(
            node_usage=data.get(FetchSource.NODE_METRICS, {}),
            node_specs=data.get(FetchSource.NODE_RESOURCES, {}),
            pod_usage=data.get(FetchSource.POD_METRICS, {}),
            pod_specs=data.get(FetchSource.POD_RESOURCES, {}),
            failures=failures,
        )
