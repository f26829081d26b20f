"""Node fetcher for cluster controller - fetches node objects from the core API."""

from __future__ import annotations

import json
import logging
from typing import Any

from kubeusage.constants.timeouts import CLUSTER_REQUEST_TIMEOUT

logger = logging.getLogger(__name__)


class NodeFetcher:
    """Fetches node data from Kubernetes cluster."""

    def __init__(self, run_kubectl_func: Any) -> None:
        """Initialize with kubectl runner function.

        Args:
            run_kubectl_func: Async function to run kubectl commands
        """
        self._run_kubectl = run_kubectl_func

    async def fetch_nodes_raw(
        self,
        request_timeout: str | None = None,
    ) -> list[dict[str, Any]]:
        """Fetch raw node objects for the whole cluster."""
        output = await self._run_kubectl(
            (
                "get",
                "nodes",
                "-o",
                "json",
                f"--request-timeout={request_timeout or CLUSTER_REQUEST_TIMEOUT}",
            )
        )
        if not output:
            return []

        try:
            data = json.loads(output)
        except json.JSONDecodeError:
            logger.warning("Error parsing nodes JSON")
            raise

        items = data.get("items") or []
        logger.debug("Fetched %d nodes", len(items))
        return items
