"""Tests for node parser."""

from __future__ import annotations

from decimal import Decimal

import pytest

from kubeusage.controllers.cluster.parsers.node_parser import NodeParser


@pytest.fixture
def parser() -> NodeParser:
    """Create NodeParser instance."""
    return NodeParser()


class TestNodeParser:
    """Tests for NodeParser class."""

    def test_parse_node_spec(self, parser: NodeParser, raw_node) -> None:
        """Test allocatable and capacity are parsed."""
        spec = parser.parse_node_spec(raw_node("worker-1", cpu="3920m", memory="15Gi"))

        assert spec.name == "worker-1"
        assert spec.allocatable.cpu.amount == Decimal("3.92")
        assert spec.allocatable.memory.amount == Decimal(15 * 1024**3)
        assert spec.capacity.get("pods").amount == Decimal(110)

    def test_parse_node_spec_missing_status(self, parser: NodeParser) -> None:
        """Test a node without status parses with empty lists."""
        spec = parser.parse_node_spec({"metadata": {"name": "bare"}})

        assert spec.name == "bare"
        assert spec.allocatable.is_empty()
        assert spec.capacity.is_empty()

    def test_parse_node_usage(self, parser: NodeParser) -> None:
        """Test a NodeMetrics item is parsed."""
        usage = parser.parse_node_usage(
            {
                "metadata": {"name": "worker-1"},
                "timestamp": "2024-01-01T00:00:00Z",
                "window": "20s",
                "usage": {"cpu": "250034567n", "memory": "2048Ki"},
            }
        )

        assert usage.name == "worker-1"
        assert usage.usage.cpu.amount == Decimal("0.250034567")
        assert usage.usage.memory.amount == Decimal(2 * 1024**2)

    def test_parse_node_specs_keyed_by_name(self, parser: NodeParser, raw_node) -> None:
        """Test node specs are keyed by name and unnamed items skipped."""
        specs = parser.parse_node_specs(
            [raw_node("worker-2"), raw_node("worker-1"), {"metadata": {}}]
        )

        assert set(specs) == {"worker-1", "worker-2"}

    def test_parse_node_usages_keyed_by_name(self, parser: NodeParser) -> None:
        """Test node usages are keyed by name."""
        usages = parser.parse_node_usages(
            [
                {"metadata": {"name": "a"}, "usage": {"cpu": "1"}},
                {"metadata": {"name": "b"}, "usage": {"cpu": "2"}},
                {"usage": {"cpu": "3"}},
            ]
        )

        assert set(usages) == {"a", "b"}
        assert usages["b"].usage.cpu.amount == Decimal(2)

    def test_parse_empty(self, parser: NodeParser) -> None:
        """Test empty input yields empty mappings."""
        assert parser.parse_node_specs([]) == {}
        assert parser.parse_node_usages([]) == {}

    def test_null_metadata_is_skipped(self, parser: NodeParser, raw_node) -> None:
        """Test items with "metadata": null are skipped instead of failing."""
        specs = parser.parse_node_specs([{"metadata": None}, raw_node("a")])
        usages = parser.parse_node_usages(
            [{"metadata": None, "usage": {"cpu": "1"}}, {"metadata": {"name": "b"}}]
        )

        assert set(specs) == {"a"}
        assert set(usages) == {"b"}
        assert parser.parse_node_usage({"metadata": None, "usage": {}}).name == ""
