"""Core resource, node and pod models."""

from kubeusage.models.core.node_info import NodeSpec, NodeUsage
from kubeusage.models.core.pod_info import (
    ContainerSpec,
    ContainerUsage,
    PodKey,
    PodSpec,
    PodUsage,
)
from kubeusage.models.core.quantity import (
    Quantity,
    ResourceList,
    format_resource_list,
    sum_resource_lists,
)

__all__ = [
    "ContainerSpec",
    "ContainerUsage",
    "NodeSpec",
    "NodeUsage",
    "PodKey",
    "PodSpec",
    "PodUsage",
    "Quantity",
    "ResourceList",
    "format_resource_list",
    "sum_resource_lists",
]
