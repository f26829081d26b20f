"""Report generator - turns a ResourceReport into the pod and node tables."""

from __future__ import annotations

import logging

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from kubeusage.constants.defaults import MAX_NAME_LENGTH_DEFAULT
from kubeusage.constants.values import (
    MISSING_VALUE,
    NODE_TABLE_HEADERS,
    POD_TABLE_HEADERS,
    TRUNCATION_MARKER,
)
from kubeusage.models.core.quantity import ResourceList, format_resource_list
from kubeusage.models.report.report_data import ResourceReport

logger = logging.getLogger(__name__)


def truncate_name(name: str, max_length: int = MAX_NAME_LENGTH_DEFAULT) -> str:
    """Shorten long identifiers while keeping both ends readable.

    Names up to `max_length` characters are returned unchanged. Longer names
    keep the first and last `max_length // 2` characters around "...", so
    generated suffixes such as pod hashes stay visible.
    """
    if len(name) <= max_length:
        return name
    half = max_length // 2
    return f"{name[:half]}{TRUNCATION_MARKER}{name[len(name) - half:]}"


def format_optional_resource_list(resource_list: ResourceList | None) -> str:
    """Format a resource list, or the missing marker when there is no data."""
    if resource_list is None:
        return MISSING_VALUE
    return format_resource_list(resource_list)


class ReportGenerator:
    """Build and render the pod-level and node-level tables."""

    def __init__(
        self,
        report: ResourceReport,
        max_name_length: int = MAX_NAME_LENGTH_DEFAULT,
    ) -> None:
        self.report = report
        self.max_name_length = max_name_length

    def _name(self, name: str) -> str:
        return truncate_name(name, self.max_name_length) if name else MISSING_VALUE

    def pod_rows(self) -> list[list[str]]:
        """Rows for the pod table, in report order."""
        return [
            [
                self._name(row.namespace),
                self._name(row.pod_name),
                self._name(row.container_name),
                format_optional_resource_list(row.usage),
                format_optional_resource_list(row.requests),
                format_optional_resource_list(row.limits),
            ]
            for row in self.report.container_rows
        ]

    def node_rows(self) -> list[list[str]]:
        """Rows for the node table, in report order."""
        return [
            [
                self._name(row.node_name),
                format_resource_list(row.usage),
                format_optional_resource_list(row.allocatable),
                format_resource_list(row.requests),
                format_resource_list(row.limits),
            ]
            for row in self.report.node_rows
        ]

    def failure_messages(self) -> list[str]:
        """One message per failed retrieval, in a stable order."""
        return [
            self.report.failures[source]
            for source in sorted(self.report.failures, key=lambda s: s.value)
        ]

    @staticmethod
    def _build_table(headers: tuple[str, ...], rows: list[list[str]]) -> Table:
        table = Table(box=box.ASCII, header_style="bold", show_lines=False)
        for header in headers:
            table.add_column(header, no_wrap=True)
        for row in rows:
            table.add_row(*(escape(cell) for cell in row))
        return table

    def build_pod_table(self) -> Table:
        return self._build_table(POD_TABLE_HEADERS, self.pod_rows())

    def build_node_table(self) -> Table:
        return self._build_table(NODE_TABLE_HEADERS, self.node_rows())

    def render(self, console: Console, error_console: Console | None = None) -> None:
        """Print warnings for failed retrievals, then both tables.

        Args:
            console: Destination of the two tables.
            error_console: Destination of warnings; defaults to `console`.
        """
        warnings_to = error_console or console
        for message in self.failure_messages():
            warnings_to.print(f"[bold yellow]Warning:[/bold yellow] {escape(message)}")

        console.print(self.build_pod_table())
        console.print(self.build_node_table())
        logger.debug(
            "Rendered %d pod rows and %d node rows",
            len(self.report.container_rows),
            len(self.report.node_rows),
        )
