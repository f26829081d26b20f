"""Per-cycle snapshot and report models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from kubeusage.constants.enums import FetchSource
from kubeusage.models.core.node_info import NodeSpec, NodeUsage
from kubeusage.models.core.pod_info import PodKey, PodSpec, PodUsage
from kubeusage.models.core.quantity import ResourceList


class ClusterSnapshot(BaseModel):
    """Everything retrieved in one report cycle.

    Each mapping is filled by exactly one retrieval. A failed retrieval leaves
    its mapping empty and records its error message in `failures`.
    """

    model_config = ConfigDict(frozen=True)

    node_usage: dict[str, NodeUsage] = Field(default_factory=dict)
    node_specs: dict[str, NodeSpec] = Field(default_factory=dict)
    pod_usage: dict[PodKey, PodUsage] = Field(default_factory=dict)
    pod_specs: dict[PodKey, PodSpec] = Field(default_factory=dict)
    failures: dict[FetchSource, str] = Field(default_factory=dict)

    @property
    def has_failures(self) -> bool:
        return bool(self.failures)


class ContainerResourceRow(BaseModel):
    """One observed container correlated with its declared resources.

    `requests` and `limits` are None when no declared spec was found for the
    container. `usage` is None for pods listed without metrics.
    """

    model_config = ConfigDict(frozen=True)

    namespace: str
    pod_name: str
    container_name: str
    node_name: str = ""
    usage: ResourceList | None = None
    requests: ResourceList | None = None
    limits: ResourceList | None = None

    @property
    def has_spec(self) -> bool:
        return self.requests is not None


class NodeResourceTotals(BaseModel):
    """Summed requests and limits of every container scheduled to a node."""

    model_config = ConfigDict(frozen=True)

    node_name: str
    requests: ResourceList = Field(default_factory=ResourceList)
    limits: ResourceList = Field(default_factory=ResourceList)
    container_count: int = 0


class NodeResourceRow(BaseModel):
    """Observed usage of a node next to its allocatable and summed intent."""

    model_config = ConfigDict(frozen=True)

    node_name: str
    usage: ResourceList = Field(default_factory=ResourceList)
    allocatable: ResourceList | None = None
    requests: ResourceList = Field(default_factory=ResourceList)
    limits: ResourceList = Field(default_factory=ResourceList)


class ResourceReport(BaseModel):
    """Correlated and aggregated output of one report cycle."""

    model_config = ConfigDict(frozen=True)

    container_rows: list[ContainerResourceRow] = Field(default_factory=list)
    node_rows: list[NodeResourceRow] = Field(default_factory=list)
    failures: dict[FetchSource, str] = Field(default_factory=dict)
