"""Fixed-point money helpers.

All ledger arithmetic happens on integer minor units (cents). Amounts coming
from the input are converted to ``Decimal`` first and rounded exactly once,
with ROUND_HALF_UP, when they become a posting.
"""

from decimal import ROUND_HALF_UP, Decimal

MINOR_PER_MAJOR = 100


def to_decimal(value: Decimal | int | float | str) -> Decimal:
    """
    Convert an input amount to Decimal.

    Floats are routed through ``str`` so 11.8375 becomes Decimal("11.8375")
    rather than its binary expansion.

    Args:
        value: Amount as Decimal, int, float or numeric string

    Returns:
        The amount as Decimal
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise TypeError("Boolean is not a monetary amount")
    return Decimal(str(value))


def to_minor_units(amount: Decimal) -> int:
    """
    Convert a Decimal major-unit amount to integer minor units.
    Uses ROUND_HALF_UP, which rounds halves away from zero.

    Args:
        amount: Amount in major units (e.g. 94.7 NOK)

    Returns:
        Amount in minor units (e.g. 9470)
    """
    minor = amount * MINOR_PER_MAJOR
    return int(minor.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def minor_to_major(minor: int) -> Decimal:
    """Convert integer minor units back to a two-place Decimal."""
    return (Decimal(minor) / MINOR_PER_MAJOR).quantize(Decimal("0.01"))


def format_minor(minor: int) -> str:
    """
    Render minor units as major.minor text.

    Example:
        9470 -> "94.70", -5 -> "-0.05"
    """
    sign = "-" if minor < 0 else ""
    major, cents = divmod(abs(minor), MINOR_PER_MAJOR)
    return f"{sign}{major}.{cents:02d}"
