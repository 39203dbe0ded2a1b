"""Amounts: conversion from major currency units to stored minor units.

Invariants:
    - Stored amounts are integers (cents)
    - Conversion is exact for inputs with at most two decimal places
"""

from decimal import Decimal, ROUND_HALF_UP

MINOR_UNITS_PER_MAJOR = 100


def to_minor_units(amount: Decimal) -> int:
    """Convert a major-unit amount (e.g. 12.5 dollars) to minor units (1250)."""
    scaled = amount * MINOR_UNITS_PER_MAJOR
    return int(scaled.to_integral_value(rounding=ROUND_HALF_UP))
