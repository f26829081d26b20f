"""Shared fixtures for kubeusage tests."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from kubeusage.models.core.node_info import NodeSpec, NodeUsage
from kubeusage.models.core.pod_info import (
    ContainerSpec,
    ContainerUsage,
    PodSpec,
    PodUsage,
)
from kubeusage.models.core.quantity import ResourceList


def _resources(cpu: str | None = None, memory: str | None = None) -> ResourceList:
    raw: dict[str, str] = {}
    if cpu is not None:
        raw["cpu"] = cpu
    if memory is not None:
        raw["memory"] = memory
    return ResourceList.from_raw(raw)


@pytest.fixture
def resources() -> Callable[..., ResourceList]:
    """Factory: resources(cpu="100m", memory="50Mi") -> ResourceList."""
    return _resources


@pytest.fixture
def node_usage() -> Callable[..., NodeUsage]:
    """Factory for NodeUsage records."""

    def factory(name: str, cpu: str = "0", memory: str = "0") -> NodeUsage:
        return NodeUsage(name=name, usage=_resources(cpu, memory))

    return factory


@pytest.fixture
def node_spec() -> Callable[..., NodeSpec]:
    """Factory for NodeSpec records."""

    def factory(name: str, cpu: str = "4", memory: str = "16Gi") -> NodeSpec:
        return NodeSpec(
            name=name,
            allocatable=_resources(cpu, memory),
            capacity=_resources(cpu, memory),
        )

    return factory


@pytest.fixture
def pod_usage() -> Callable[..., PodUsage]:
    """Factory: pod_usage("web", "default", {"app": ("10m", "20Mi")})."""

    def factory(
        name: str,
        namespace: str,
        containers: dict[str, tuple[str, str]],
    ) -> PodUsage:
        return PodUsage(
            name=name,
            namespace=namespace,
            containers=tuple(
                ContainerUsage(name=container, usage=_resources(cpu, memory))
                for container, (cpu, memory) in containers.items()
            ),
        )

    return factory


@pytest.fixture
def pod_spec() -> Callable[..., PodSpec]:
    """Factory: pod_spec("web", "default", "node-1", {"app": {"requests": (...)}})."""

    def factory(
        name: str,
        namespace: str,
        node_name: str,
        containers: dict[str, dict[str, tuple[str, str]]],
    ) -> PodSpec:
        return PodSpec(
            name=name,
            namespace=namespace,
            node_name=node_name,
            containers=tuple(
                ContainerSpec(
                    name=container,
                    requests=_resources(*declared.get("requests", (None, None))),
                    limits=_resources(*declared.get("limits", (None, None))),
                )
                for container, declared in containers.items()
            ),
        )

    return factory


@pytest.fixture
def raw_node() -> Callable[..., dict[str, Any]]:
    """Factory for raw node objects as returned by `kubectl get nodes -o json`."""

    def factory(name: str, cpu: str = "4", memory: str = "16Gi") -> dict[str, Any]:
        return {
            "metadata": {"name": name},
            "status": {
                "allocatable": {"cpu": cpu, "memory": memory, "pods": "110"},
                "capacity": {"cpu": cpu, "memory": memory, "pods": "110"},
            },
        }

    return factory


@pytest.fixture
def raw_pod() -> Callable[..., dict[str, Any]]:
    """Factory for raw pod objects as returned by `kubectl get pods -o json`."""

    def factory(
        name: str,
        namespace: str,
        node_name: str,
        containers: list[dict[str, Any]],
    ) -> dict[str, Any]:
        return {
            "metadata": {"name": name, "namespace": namespace},
            "spec": {"nodeName": node_name, "containers": containers},
        }

    return factory
