"""Node models for observed usage and declared capacity."""

from pydantic import BaseModel, ConfigDict, Field

from kubeusage.models.core.quantity import ResourceList


class NodeUsage(BaseModel):
    """Instantaneous observed consumption of one node."""

    model_config = ConfigDict(frozen=True)

    name: str
    usage: ResourceList = Field(default_factory=ResourceList)


class NodeSpec(BaseModel):
    """Declared resource ceilings of one node."""

    model_config = ConfigDict(frozen=True)

    name: str
    allocatable: ResourceList = Field(default_factory=ResourceList)
    capacity: ResourceList = Field(default_factory=ResourceList)
