"""Pod and container models for observed usage and declared spec."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from kubeusage.models.core.quantity import ResourceList

PodKey = tuple[str, str]


class ContainerUsage(BaseModel):
    """Observed consumption of one container."""

    model_config = ConfigDict(frozen=True)

    name: str
    usage: ResourceList = Field(default_factory=ResourceList)


class PodUsage(BaseModel):
    """Observed consumption of one pod, container by container."""

    model_config = ConfigDict(frozen=True)

    name: str
    namespace: str = ""
    containers: tuple[ContainerUsage, ...] = ()

    @property
    def key(self) -> PodKey:
        return (self.namespace, self.name)


class ContainerSpec(BaseModel):
    """Declared requests and limits of one container."""

    model_config = ConfigDict(frozen=True)

    name: str
    requests: ResourceList = Field(default_factory=ResourceList)
    limits: ResourceList = Field(default_factory=ResourceList)


class PodSpec(BaseModel):
    """Declared spec of one pod and the node it is scheduled to."""

    model_config = ConfigDict(frozen=True)

    name: str
    namespace: str = ""
    node_name: str = ""
    containers: tuple[ContainerSpec, ...] = ()

    @property
    def key(self) -> PodKey:
        return (self.namespace, self.name)

    def find_container(self, name: str) -> ContainerSpec | None:
        """Return the declared container named `name`, if any."""
        for container in self.containers:
            if container.name == name:
                return container
        return None
