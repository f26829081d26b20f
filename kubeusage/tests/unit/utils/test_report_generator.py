"""Tests for report generator."""

from __future__ import annotations

import io

import pytest
from rich.console import Console

from kubeusage.constants.enums import FetchSource
from kubeusage.models.core.quantity import ResourceList
from kubeusage.models.report.report_data import (
    ContainerResourceRow,
    NodeResourceRow,
    ResourceReport,
)
from kubeusage.utils.report_generator import (
    ReportGenerator,
    format_optional_resource_list,
    truncate_name,
)


def _console() -> Console:
    return Console(file=io.StringIO(), width=250, no_color=True, force_terminal=False)


@pytest.fixture
def report(resources) -> ResourceReport:
    return ResourceReport(
        container_rows=[
            ContainerResourceRow(
                namespace="default",
                pod_name="web",
                container_name="app",
                node_name="worker-1",
                usage=resources("5m", "20Mi"),
                requests=resources("100m", "50Mi"),
                limits=resources("500m", "256Mi"),
            ),
            ContainerResourceRow(
                namespace="default",
                pod_name="ghost",
                container_name="app",
                usage=resources("1m", "1Mi"),
            ),
        ],
        node_rows=[
            NodeResourceRow(
                node_name="worker-1",
                usage=resources("500m", "1Gi"),
                allocatable=resources("4", "16Gi"),
                requests=resources("100m", "50Mi"),
                limits=resources("500m", "256Mi"),
            ),
            NodeResourceRow(node_name="worker-2"),
        ],
    )


class TestTruncateName:
    """Tests for truncate_name."""

    def test_short_names_unchanged(self) -> None:
        assert truncate_name("a" * 29) == "a" * 29
        assert truncate_name("a" * 30) == "a" * 30

    def test_long_name_keeps_both_ends(self) -> None:
        name = "abcdefghijklmnopqrstuvwxyz01234"
        assert len(name) == 31

        truncated = truncate_name(name)

        assert truncated == "abcdefghijklmno...qrstuvwxyz01234"
        assert len(truncated) == 33

    def test_generated_pod_suffix_stays_visible(self) -> None:
        name = "payments-api-deployment-canary-7d4b9c6f8d-x2kqp"
        truncated = truncate_name(name)

        assert truncated.startswith("payments-api-de")
        assert truncated.endswith("-7d4b9c6f8d-x2kqp"[-15:])

    def test_custom_max_length(self) -> None:
        assert truncate_name("abcdefghij", max_length=4) == "ab...ij"

    def test_empty_name(self) -> None:
        assert truncate_name("") == ""


class TestFormatOptionalResourceList:
    """Tests for format_optional_resource_list."""

    def test_none_is_missing_marker(self) -> None:
        assert format_optional_resource_list(None) == "-"

    def test_empty_list_is_zero(self) -> None:
        assert format_optional_resource_list(ResourceList()) == "cpu=0 mem=0Mi"


class TestReportGenerator:
    """Tests for ReportGenerator."""

    def test_pod_rows(self, report: ResourceReport) -> None:
        rows = ReportGenerator(report).pod_rows()

        assert rows[0] == [
            "default",
            "web",
            "app",
            "cpu=5m mem=20Mi",
            "cpu=100m mem=50Mi",
            "cpu=500m mem=256Mi",
        ]
        assert rows[1][4:] == ["-", "-"]

    def test_node_rows(self, report: ResourceReport) -> None:
        rows = ReportGenerator(report).node_rows()

        assert rows[0] == [
            "worker-1",
            "cpu=500m mem=1024Mi",
            "cpu=4 mem=16384Mi",
            "cpu=100m mem=50Mi",
            "cpu=500m mem=256Mi",
        ]
        assert rows[1] == [
            "worker-2",
            "cpu=0 mem=0Mi",
            "-",
            "cpu=0 mem=0Mi",
            "cpu=0 mem=0Mi",
        ]

    def test_names_truncated(self, resources) -> None:
        report = ResourceReport(
            container_rows=[
                ContainerResourceRow(
                    namespace="n" * 40,
                    pod_name="p" * 40,
                    container_name="c",
                    usage=resources("1m", "1Mi"),
                )
            ]
        )

        row = ReportGenerator(report, max_name_length=10).pod_rows()[0]

        assert row[:3] == ["nnnnn...nnnnn", "ppppp...ppppp", "c"]

    def test_failure_messages_sorted(self) -> None:
        report = ResourceReport(
            failures={
                FetchSource.POD_RESOURCES: "unable to get pod resources: b",
                FetchSource.NODE_METRICS: "unable to get node metrics: a",
            }
        )

        assert ReportGenerator(report).failure_messages() == [
            "unable to get node metrics: a",
            "unable to get pod resources: b",
        ]

    def test_render_tables(self, report: ResourceReport) -> None:
        console = _console()

        ReportGenerator(report).render(console)

        output = console.file.getvalue()
        for header in ("Namespace", "Container", "Requests", "Allocatable", "Resource Limits"):
            assert header in output
        assert "cpu=4 mem=16384Mi" in output
        assert "worker-2" in output
        assert output.index("Namespace") < output.index("Allocatable")

    def test_render_warnings_to_error_console(self) -> None:
        report = ResourceReport(
            failures={FetchSource.POD_METRICS: "unable to get pod metrics: [denied]"}
        )
        console = _console()
        error_console = _console()

        ReportGenerator(report).render(console, error_console)

        warnings = error_console.file.getvalue()
        assert "Warning: unable to get pod metrics: [denied]" in warnings
        assert "Warning" not in console.file.getvalue()
        assert "Node" in console.file.getvalue()
