"""Pod fetcher for cluster controller - fetches pod objects from the core API."""

from __future__ import annotations

import json
import logging
from typing import Any

from kubeusage.constants.timeouts import CLUSTER_REQUEST_TIMEOUT

logger = logging.getLogger(__name__)


class PodFetcher:
    """Fetches pod data from Kubernetes cluster."""

    def __init__(self, run_kubectl_func: Any) -> None:
        """Initialize with kubectl runner function.

        Args:
            run_kubectl_func: Async function to run kubectl commands
        """
        self._run_kubectl = run_kubectl_func

    @staticmethod
    def _build_pods_args(
        *,
        namespace: str | None,
        request_timeout: str,
    ) -> tuple[str, ...]:
        """Build pod query arguments for all namespaces or one namespace."""
        args: list[str] = ["get", "pods"]
        if namespace:
            args.extend(["-n", namespace])
        else:
            args.append("-A")
        args.extend(["-o", "json", f"--request-timeout={request_timeout}"])
        return tuple(args)

    async def fetch_pods_raw(
        self,
        *,
        namespace: str | None = None,
        request_timeout: str | None = None,
    ) -> list[dict[str, Any]]:
        """Fetch raw pod objects for all namespaces or a single namespace."""
        output = await self._run_kubectl(
            self._build_pods_args(
                namespace=namespace,
                request_timeout=request_timeout or CLUSTER_REQUEST_TIMEOUT,
            )
        )
        if not output:
            return []

        try:
            data = json.loads(output)
        except json.JSONDecodeError:
            logger.warning("Error parsing pods JSON")
            raise

        items = data.get("items") or []
        logger.debug("Fetched %d pods (namespace=%s)", len(items), namespace or "all")
        return items
