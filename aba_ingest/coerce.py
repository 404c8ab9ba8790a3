"""
Field coercion for aba-ingest.

Converts a raw fixed-width column into a typed value. ABA files are
hand-edited often enough that every coercer is lenient:

- Numeric columns are read the way a leading-integer parse reads them
  (optional whitespace and sign, then digits). Anything else becomes 0.
- Money columns hold integer cents and are divided by 100 exactly once.
- BSB columns drop the single ``-`` separator (``062-000`` -> ``062000``).
- ``raw`` columns are returned byte-for-byte, padding included.

None of these functions raise. Substring extraction clamps the column
range to the length of the line, so a short line yields a short or empty
value instead of an error.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Callable, Union

FieldValue = Union[str, int, float]

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class FieldType(str, Enum):
    """Closed set of column types a ``FieldSpec`` may declare."""

    STRING = "string"
    MONEY = "money"
    INTEGER = "integer"
    BSB = "bsb"
    RAW = "raw"


def extract_field(line: str, start: int, end: int) -> str:
    """Return ``line[start:end]`` with both offsets clamped to the line.

    Negative offsets are treated as 0 and a reversed range is swapped, so
    any pair of integers selects some (possibly empty) substring.
    """
    length = len(line)
    start = min(max(start, 0), length)
    end = min(max(end, 0), length)
    if start > end:
        start, end = end, start
    return line[start:end]


def to_integer(raw: str) -> int:
    """Parse the leading integer of *raw*; 0 when there is none."""
    match = _LEADING_INT.match(raw)
    if match is None:
        return 0
    return int(match.group(1))


def to_money(raw: str) -> float:
    """Parse integer cents and convert to a currency amount."""
    return to_integer(raw) / 100


def to_string(raw: str) -> str:
    return raw.strip()


def to_bsb(raw: str) -> str:
    """Drop the ``-`` separator of a BSB and trim the result.

    The value is not checked against a real bank-state-branch code.
    """
    return raw.replace("-", "", 1).strip()


def to_raw(raw: str) -> str:
    return raw


COERCERS: dict[FieldType, Callable[[str], FieldValue]] = {
    FieldType.STRING: to_string,
    FieldType.MONEY: to_money,
    FieldType.INTEGER: to_integer,
    FieldType.BSB: to_bsb,
    FieldType.RAW: to_raw,
}


def coerce(raw: str, field_type: FieldType) -> FieldValue:
    """Coerce *raw* according to *field_type*."""
    return COERCERS[field_type](raw)
