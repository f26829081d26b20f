"""Tests for base controller module."""

from __future__ import annotations

from typing import Any

import pytest

from kubeusage.controllers.base import BaseController, FetchResult


class TestFetchResult:
    """Tests for FetchResult dataclass."""

    def test_defaults(self) -> None:
        result = FetchResult(success=True)

        assert result.data is None
        assert result.error is None
        assert result.duration_ms == 0.0

    def test_with_data(self) -> None:
        result = FetchResult(success=True, data={"a": 1}, duration_ms=12.5)

        assert result.data == {"a": 1}
        assert result.duration_ms == 12.5

    def test_failure_carries_message(self) -> None:
        result = FetchResult(success=False, error="unable to get pod metrics: denied")

        assert result.success is False
        assert result.data is None
        assert result.error == "unable to get pod metrics: denied"


class TestBaseController:
    """Tests for BaseController."""

    def test_cannot_instantiate_abstract(self) -> None:
        with pytest.raises(TypeError):
            BaseController()  # type: ignore[abstract]

    @pytest.mark.asyncio
    async def test_concrete_subclass(self) -> None:
        class StaticController(BaseController):
            async def check_connection(self) -> bool:
                return True

            async def fetch_all(self) -> Any:
                return {"nodes": []}

        controller = StaticController()

        assert await controller.check_connection() is True
        assert await controller.fetch_all() == {"nodes": []}
