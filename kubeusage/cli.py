"""Command-line entry point: one report cycle from fetch to rendered tables."""

from __future__ import annotations

import argparse
import asyncio
import logging
import shutil
from collections.abc import Sequence

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from kubeusage.analysis.aggregator import ResourceAggregator
from kubeusage.constants.values import APP_NAME
from kubeusage.controllers.cluster.controller import ResourceUsageController
from kubeusage.models.report.report_data import ResourceReport
from kubeusage.models.state.config_manager import (
    ConfigError,
    ConfigManager,
    ReportSettings,
)
from kubeusage.utils.report_generator import ReportGenerator

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_PARTIAL_DATA = 1
EXIT_STARTUP_FAILURE = 2

# Tables are never wrapped when output is redirected.
_NON_TERMINAL_WIDTH = 250


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description=(
            "Show live CPU/memory usage next to declared requests and limits "
            "for every container, and per-node totals."
        ),
    )
    parser.add_argument(
        "--kubeconfig",
        help="Path to the kubeconfig file (default: $KUBECONFIG or ~/.kube/config)",
    )
    parser.add_argument(
        "--context", help="Kubeconfig context to use (default: current context)"
    )
    parser.add_argument(
        "-n",
        "--namespace",
        help="Only report pod usage in this namespace (default: all namespaces)",
    )
    parser.add_argument(
        "--max-length",
        dest="max_name_length",
        type=int,
        help="Truncate names longer than this many characters (default: 30)",
    )
    parser.add_argument(
        "--request-timeout",
        help="Timeout for each API request, e.g. 30s, 2m or 1h (default: 30s)",
    )
    parser.add_argument(
        "--include-unmetered",
        dest="include_pods_without_metrics",
        action="store_true",
        default=None,
        help="Also list pods that have a spec but no usage metrics",
    )
    parser.add_argument("--config", help="Optional YAML settings file")
    parser.add_argument(
        "--no-color", action="store_true", help="Disable colored output"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    return parser


def configure_logging(verbose: bool, console: Console) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=verbose)],
        force=True,
    )


def settings_overrides(args: argparse.Namespace) -> dict[str, object]:
    return {
        "kubeconfig": args.kubeconfig,
        "context": args.context,
        "namespace": args.namespace,
        "max_name_length": args.max_name_length,
        "request_timeout": args.request_timeout,
        "include_pods_without_metrics": args.include_pods_without_metrics,
    }


async def run_report(
    controller: ResourceUsageController, settings: ReportSettings
) -> ResourceReport:
    """Fetch a fresh snapshot and build this cycle's report."""
    snapshot = await controller.fetch_all()
    return ResourceAggregator(
        snapshot,
        namespace=settings.namespace,
        include_pods_without_metrics=settings.include_pods_without_metrics,
    ).build()


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    error_console = Console(stderr=True, no_color=args.no_color)
    console = Console(no_color=args.no_color)
    if not console.is_terminal:
        console.width = _NON_TERMINAL_WIDTH
    configure_logging(args.verbose, error_console)

    try:
        settings = ConfigManager(args.config).load(settings_overrides(args))
    except ConfigError as exc:
        error_console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        return EXIT_STARTUP_FAILURE
    logger.debug("Settings: %s", settings.model_dump())

    if shutil.which("kubectl") is None:
        error_console.print(
            "[bold red]Error:[/bold red] kubectl executable not found on PATH"
        )
        return EXIT_STARTUP_FAILURE

    controller = ResourceUsageController(settings)
    if not asyncio.run(controller.check_connection()):
        error_console.print(
            "[bold red]Error:[/bold red] unable to reach the Kubernetes API server"
        )
        return EXIT_STARTUP_FAILURE

    report = asyncio.run(run_report(controller, settings))
    ReportGenerator(report, settings.max_name_length).render(console, error_console)
    return EXIT_PARTIAL_DATA if report.failures else EXIT_OK
