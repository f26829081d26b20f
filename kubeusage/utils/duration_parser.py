"""Parsing of kubectl `--request-timeout` durations.

kubectl accepts a bare number of seconds ("30") or a Go duration built from
`h`, `m`, `s` and `ms` parts ("30s", "2m", "1h30m", "1.5s"). Zero disables
the request timeout.
"""

from __future__ import annotations

import re

_DURATION_UNITS: dict[str, float] = {
    "h": 3600.0,
    "m": 60.0,
    "s": 1.0,
    "ms": 0.001,
}
_NUMBER = r"(?:\d+(?:\.\d*)?|\.\d+)"
# "ms" is listed before "m" so it wins the alternation.
_DURATION_PART = re.compile(rf"({_NUMBER})(ms|h|m|s)")
_DURATION_PATTERN = re.compile(rf"{_NUMBER}|(?:{_NUMBER}(?:ms|h|m|s))+")


def parse_duration_seconds(value: str) -> float:
    """Return a request timeout in seconds.

    Raises:
        ValueError: If the value is neither a bare number nor a Go duration.
    """
    text = value.strip().lower()
    if not _DURATION_PATTERN.fullmatch(text):
        raise ValueError(f"invalid duration {value!r}; use e.g. 30s, 2m or 1h")

    parts = _DURATION_PART.findall(text)
    if not parts:
        return float(text)
    return sum(float(number) * _DURATION_UNITS[unit] for number, unit in parts)
