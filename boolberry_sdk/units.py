"""
Amount conversion helpers.

Amounts are always integers in the smallest currency unit. Conversion to a
human readable value only happens at the display boundary.
"""
from decimal import Decimal, InvalidOperation
from typing import Union

# Smallest units per display unit
MULTIPLIER = 10**12

# Flat fee attached to every transfer, in smallest units (0.01 BBR)
DEFAULT_FEE = 10**10


def to_display(amount: int) -> float:
    """
    Convert an amount in smallest units to display units.

    Args:
        amount: Amount in smallest units

    Returns:
        Amount in display units as a float
    """
    if not isinstance(amount, int) or isinstance(amount, bool):
        raise TypeError(f"Amount must be an int, got {type(amount).__name__}")
    return amount / MULTIPLIER


def from_display(value: Union[int, str, Decimal]) -> int:
    """
    Convert a display-unit value to smallest units without going through float.

    Args:
        value: Display amount, e.g. ``5``, ``"1.25"`` or ``Decimal("0.5")``

    Returns:
        Amount in smallest units

    Raises:
        ValueError: If the value is negative, not a number, or more precise
            than the smallest unit
    """
    if isinstance(value, float):
        raise TypeError("Pass display amounts as int, str or Decimal, not float")
    try:
        scaled = Decimal(value) * MULTIPLIER
    except InvalidOperation:
        raise ValueError(f"Invalid amount: {value!r}")
    if not scaled.is_finite():
        raise ValueError(f"Invalid amount: {value!r}")
    if scaled < 0:
        raise ValueError(f"Amount must not be negative: {value!r}")
    if scaled != scaled.to_integral_value():
        raise ValueError(f"Amount {value!r} is more precise than the smallest unit")
    return int(scaled)
