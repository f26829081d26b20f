"""Base controller for kubeusage.

Every retrieval of a report cycle runs as its own task and finishes with a
FetchResult: the parsed data on success, a descriptive error message on
failure. A failing source never cancels or corrupts the others.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


@dataclass
class FetchResult:
    """Outcome of one retrieval: data or an error message, never both."""

    success: bool
    data: Any | None = None
    error: str | None = None
    duration_ms: float = 0.0


class BaseController(ABC):
    """Base controller class.

    The CLI gates a report cycle on `check_connection` and then runs
    `fetch_all` once.
    """

    @abstractmethod
    async def check_connection(self) -> bool:
        """Check if the data source is available.

        Returns:
            True if connection is available, False otherwise
        """
        ...

    @abstractmethod
    async def fetch_all(self) -> Any:
        """Fetch all data from the source."""
        ...
