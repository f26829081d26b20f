"""Resource parsing utilities for Kubernetes quantity strings.

Provides exact parsing of Kubernetes resource strings into a decimal amount
in base units (cores for CPU, bytes for memory) together with the format the
value was written in:
- Decimal SI: "100m" -> 0.1, "1k" -> 1000, "500000000n" -> 0.5
- Binary SI: "512Mi" -> 536870912, "1Gi" -> 1073741824
- Decimal exponent: "1e3" -> 1000
- Plain numbers: "1.5" -> 1.5, "2" -> 2
"""

from __future__ import annotations

import math
import re
from decimal import ROUND_UP, Decimal, InvalidOperation, localcontext

from kubeusage.constants.enums import QuantityFormat

# Module-level constants to avoid re-creating on every function call.
# Suffix multipliers for binary SI suffixes (powers of 1024).
_BINARY_MULTIPLIERS: dict[str, int] = {
    "Ki": 1024,
    "Mi": 1024**2,
    "Gi": 1024**3,
    "Ti": 1024**4,
    "Pi": 1024**5,
    "Ei": 1024**6,
}
# Suffix exponents for decimal SI suffixes (powers of 10).
_DECIMAL_EXPONENTS: dict[str, int] = {
    "n": -9,
    "u": -6,
    "m": -3,
    "": 0,
    "k": 3,
    "M": 6,
    "G": 9,
    "T": 12,
    "P": 15,
    "E": 18,
}
_QUANTITY_PATTERN = re.compile(
    r"^(?P<number>[+-]?(?:\d+\.?\d*|\.\d+))"
    r"(?P<suffix>[eE][+-]?\d+|[a-zA-Z]*)$"
)
# Kubernetes never stores precision below nano units.
_NANO = Decimal("1e-9")
_PRECISION = 60


class QuantityParseError(ValueError):
    """Raised when a string is not a valid Kubernetes quantity."""


def parse_quantity(quantity_str: str) -> tuple[Decimal, QuantityFormat]:
    """Parse a Kubernetes quantity string.

    Args:
        quantity_str: Quantity as written in the API (e.g., "100m", "512Mi").

    Returns:
        Tuple of (amount in base units, format the quantity was written in).
        Sub-nano precision is rounded up to the next nano unit.

    Raises:
        QuantityParseError: If the string is empty or malformed.
    """
    if quantity_str is None:
        raise QuantityParseError("empty quantity")

    text = str(quantity_str).strip()
    match = _QUANTITY_PATTERN.match(text)
    if not match:
        raise QuantityParseError(f"invalid quantity {quantity_str!r}")

    suffix = match.group("suffix")
    with localcontext() as ctx:
        ctx.prec = _PRECISION
        try:
            number = Decimal(match.group("number"))
        except InvalidOperation as exc:
            raise QuantityParseError(f"invalid quantity {quantity_str!r}") from exc

        if suffix in _BINARY_MULTIPLIERS:
            amount = number * _BINARY_MULTIPLIERS[suffix]
            quantity_format = QuantityFormat.BINARY_SI
        elif suffix in _DECIMAL_EXPONENTS:
            amount = number.scaleb(_DECIMAL_EXPONENTS[suffix])
            quantity_format = QuantityFormat.DECIMAL_SI
        elif suffix[:1] in ("e", "E") and len(suffix) > 1:
            amount = number.scaleb(int(suffix[1:]))
            quantity_format = QuantityFormat.DECIMAL_EXPONENT
        else:
            raise QuantityParseError(f"unknown suffix {suffix!r} in {quantity_str!r}")

    return round_up_to_nano(amount), quantity_format


def round_up_to_nano(amount: Decimal) -> Decimal:
    """Round an amount up (away from zero) to nano-unit precision."""
    with localcontext() as ctx:
        ctx.prec = _PRECISION
        rounded = amount.quantize(_NANO, rounding=ROUND_UP)
        if not rounded:
            return Decimal(0)
        return rounded.normalize()


def scaled_value(amount: Decimal, unit: int) -> int:
    """Return amount expressed in whole units, rounded up.

    Args:
        amount: Amount in base units.
        unit: Size of one target unit in base units (e.g., 1024**2 for Mi).

    Returns:
        Integer count of units, rounded toward positive infinity.
    """
    return math.ceil(amount / Decimal(unit))


def format_decimal_si(amount: Decimal) -> str:
    """Format an amount with the largest decimal SI suffix that keeps it integral.

    Examples: 0.75 -> "750m", 2 -> "2", 1.5 -> "1500m", 0.250034567 -> "250034567n".
    """
    if amount == 0:
        return "0"

    nanos = int(amount.scaleb(9).to_integral_value(rounding=ROUND_UP))
    exponent = -9
    while exponent < 18 and nanos % 1000 == 0:
        nanos //= 1000
        exponent += 3

    suffix = next(key for key, value in _DECIMAL_EXPONENTS.items() if value == exponent)
    return f"{nanos}{suffix}"


def format_binary_si(amount: Decimal) -> str:
    """Format an amount with the largest binary SI suffix that keeps it integral.

    Fractional byte counts have no binary form and fall back to decimal SI.
    """
    if amount != amount.to_integral_value():
        return format_decimal_si(amount)

    value = int(amount)
    if value == 0:
        return "0"

    suffix = ""
    for candidate, multiplier in _BINARY_MULTIPLIERS.items():
        if value % multiplier != 0:
            break
        suffix = candidate
    if suffix:
        return f"{value // _BINARY_MULTIPLIERS[suffix]}{suffix}"
    return str(value)


def format_decimal_exponent(amount: Decimal) -> str:
    """Format an amount as mantissa and power-of-ten exponent (e.g., "1e3")."""
    decimal_si = format_decimal_si(amount)
    match = _QUANTITY_PATTERN.match(decimal_si)
    if match is None:
        return decimal_si
    exponent = _DECIMAL_EXPONENTS[match.group("suffix")]
    if exponent == 0:
        return match.group("number")
    return f"{match.group('number')}e{exponent}"
