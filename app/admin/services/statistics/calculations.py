"""Pure arithmetic for statistics: growth, rates and grouped breakdowns.

Everything here is total: defined for every numeric input, zero included.
"""

import enum
import math
from collections.abc import Iterable
from decimal import Decimal
from typing import Any

from app.core.constants import CURRENCY_DECIMAL_PLACES, UNKNOWN_LABEL


def round_one_decimal(value: float) -> float:
    """Round to one decimal place, halves towards positive infinity.

    Matches ``Math.round(x * 10) / 10`` so that 12.25 -> 12.3 and
    -12.25 -> -12.2, unlike Python's banker's rounding.
    """
    return math.floor(value * 10 + 0.5) / 10


def calculate_growth(current: int | float | Decimal, previous: int | float | Decimal) -> float:
    """Calculate percentage change between two values.

    Args:
        current: Current period value.
        previous: Previous period value.

    Returns:
        Percentage change rounded to 1 decimal place.
        Returns 100.0 if there is no positive baseline and current > 0.
        Returns 0.0 if there is no positive baseline and current <= 0.
    """
    current, previous = float(current), float(previous)
    if previous <= 0:
        return 100.0 if current > 0 else 0.0
    return round_one_decimal(((current - previous) / previous) * 100)


def calculate_rate(part: int | float, total: int | float) -> float:
    """Share of ``part`` in ``total`` as a percentage, 0.0 for an empty total."""
    if total <= 0:
        return 0.0
    return round_one_decimal((part / total) * 100)


def normalize_label(raw: Any, boolean_labels: tuple[str, str] | None = None) -> str:
    """Turn a raw group-by value into a stable string key.

    Args:
        raw: Value from the grouped column (enum, bool, str, None, ...).
        boolean_labels: ``(true_label, false_label)`` for boolean columns.

    Returns:
        ``"unknown"`` for NULL, the canonical label for booleans,
        the enum value for enums, otherwise ``str(raw)``.
    """
    if raw is None:
        return UNKNOWN_LABEL
    if isinstance(raw, bool) or (boolean_labels is not None and raw in (0, 1)):
        true_label, false_label = boolean_labels or ("true", "false")
        return true_label if raw else false_label
    if isinstance(raw, enum.Enum):
        return str(raw.value)
    return str(raw)


def reduce_counts(
    rows: Iterable[tuple[Any, Any]],
    boolean_labels: tuple[str, str] | None = None,
) -> dict[str, int]:
    """Reduce ``(label, count)`` rows into a label -> count mapping.

    Rows whose labels normalize to the same key are added together, so the
    total of the result always equals the total of the input rows.
    """
    grouped: dict[str, int] = {}
    for raw_label, raw_count in rows:
        label = normalize_label(raw_label, boolean_labels)
        grouped[label] = grouped.get(label, 0) + int(raw_count or 0)
    return grouped


def reduce_sums(
    rows: Iterable[tuple[Any, Any]],
    boolean_labels: tuple[str, str] | None = None,
) -> dict[str, float]:
    """Reduce ``(label, sum)`` rows into a label -> amount mapping.

    Amounts are accumulated as Decimal and converted to float only at the
    end, keeping currency precision.
    """
    totals: dict[str, Decimal] = {}
    for raw_label, raw_amount in rows:
        label = normalize_label(raw_label, boolean_labels)
        totals[label] = totals.get(label, Decimal("0")) + to_decimal(raw_amount)
    return {label: to_amount(total) for label, total in totals.items()}


def to_decimal(value: Any) -> Decimal:
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def to_amount(value: Any) -> float:
    """Convert a currency value to float with two decimal places."""
    return round(float(to_decimal(value)), CURRENCY_DECIMAL_PLACES)
