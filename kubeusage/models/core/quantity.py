"""Resource quantity models.

`Quantity` holds an exact amount in base units (cores for CPU, bytes for
memory). `ResourceList` maps resource names to quantities and is the unit of
aggregation for requests, limits, usage and allocatable values.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from kubeusage.constants.enums import QuantityFormat
from kubeusage.constants.values import RESOURCE_CPU, RESOURCE_MEMORY
from kubeusage.utils.resource_parser import (
    QuantityParseError,
    format_binary_si,
    format_decimal_exponent,
    format_decimal_si,
    parse_quantity,
    scaled_value,
)

logger = logging.getLogger(__name__)

MEBIBYTE = 1024**2


class Quantity(BaseModel):
    """An exact resource amount with its canonical display format."""

    model_config = ConfigDict(frozen=True)

    amount: Decimal = Decimal(0)
    format: QuantityFormat = QuantityFormat.DECIMAL_SI

    @classmethod
    def parse(cls, value: str) -> Quantity:
        """Build a quantity from an API string such as "250m" or "128Mi"."""
        amount, quantity_format = parse_quantity(value)
        return cls(amount=amount, format=quantity_format)

    def __add__(self, other: Quantity) -> Quantity:
        if not isinstance(other, Quantity):
            return NotImplemented
        return Quantity(amount=self.amount + other.amount, format=self.format)

    def is_zero(self) -> bool:
        return self.amount == 0

    def scaled_value(self, unit: int) -> int:
        """Amount in whole units of `unit` base units, rounded up."""
        return scaled_value(self.amount, unit)

    def __str__(self) -> str:
        if self.format == QuantityFormat.BINARY_SI:
            return format_binary_si(self.amount)
        if self.format == QuantityFormat.DECIMAL_EXPONENT:
            return format_decimal_exponent(self.amount)
        return format_decimal_si(self.amount)


class ResourceList(BaseModel):
    """Immutable mapping of resource name to quantity."""

    model_config = ConfigDict(frozen=True)

    quantities: dict[str, Quantity] = Field(default_factory=dict)

    @classmethod
    def from_raw(cls, raw: Mapping[str, Any] | None) -> ResourceList:
        """Build a resource list from raw API values (e.g., {"cpu": "100m"}).

        Unparseable values are logged and skipped.
        """
        quantities: dict[str, Quantity] = {}
        for name, value in (raw or {}).items():
            try:
                quantities[str(name)] = Quantity.parse(value)
            except QuantityParseError as exc:
                logger.warning("Skipping resource %s: %s", name, exc)
        return cls(quantities=quantities)

    def get(self, name: str) -> Quantity:
        """Return the quantity for `name`, or zero when absent."""
        return self.quantities.get(name) or Quantity()

    @property
    def cpu(self) -> Quantity:
        return self.get(RESOURCE_CPU)

    @property
    def memory(self) -> Quantity:
        return self.get(RESOURCE_MEMORY)

    def add(self, other: ResourceList) -> ResourceList:
        """Return a new list summing both inputs per resource name."""
        merged = dict(self.quantities)
        for name, quantity in other.quantities.items():
            current = merged.get(name)
            merged[name] = quantity if current is None else current + quantity
        return ResourceList(quantities=merged)

    def __add__(self, other: ResourceList) -> ResourceList:
        if not isinstance(other, ResourceList):
            return NotImplemented
        return self.add(other)

    def is_empty(self) -> bool:
        return not self.quantities


def sum_resource_lists(resource_lists: Iterable[ResourceList]) -> ResourceList:
    """Fold many resource lists into a fresh total."""
    total = ResourceList()
    for resource_list in resource_lists:
        total = total.add(resource_list)
    return total


def format_resource_list(resource_list: ResourceList) -> str:
    """Render CPU and memory as "cpu=<cpu> mem=<N>Mi".

    CPU uses the canonical string of its own format ("750m", "2", "500e-3");
    memory is whole mebibytes, rounded up.
    """
    cpu = str(resource_list.cpu)
    memory_mi = resource_list.memory.scaled_value(MEBIBYTE)
    return f"cpu={cpu} mem={memory_mi}Mi"
