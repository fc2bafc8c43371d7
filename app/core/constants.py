"""Application-wide constants.

This module centralizes magic numbers and labels that are part of the
reporting contract. For environment-specific configuration, see config.py.
"""

# =============================================================================
# Activity Feed
# =============================================================================

# Records fetched from each event source (users, bookings, payments).
# The merged feed can therefore hold at most 3 * ACTIVITY_SOURCE_FETCH_SIZE items.
ACTIVITY_SOURCE_FETCH_SIZE: int = 5

# Currency symbol used in payment activity descriptions (Ghana cedi)
CURRENCY_SYMBOL: str = "₵"

# =============================================================================
# Grouped Metric Labels
# =============================================================================

# Bucket for rows whose group label is NULL
UNKNOWN_LABEL: str = "unknown"

# Canonical labels for boolean group columns, as (true_label, false_label)
VERIFICATION_LABELS: tuple[str, str] = ("verified", "unverified")
BOOKING_AVAILABILITY_LABELS: tuple[str, str] = ("accepting", "closed")

# =============================================================================
# Rounding
# =============================================================================

# Decimal places kept for currency sums
CURRENCY_DECIMAL_PLACES: int = 2
