"""Number rendering for CLI output."""

from __future__ import annotations

import math
from decimal import Decimal


def format_number(value: float) -> str:
    """Render a result with its shortest digits, no exponent, no trailing '.0'.

    990.0 -> '990', -0.0 -> '-0', 2.5 -> '2.5', 1e-07 -> '0.0000001',
    1e23 -> '100000000000000000000000'. Infinities render as 'inf' / '-inf'
    and NaN as 'NaN'.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    # repr() is the shortest round-tripping form; Decimal expands any exponent.
    text = format(Decimal(repr(value)), "f")
    if text.endswith(".0"):
        text = text[:-2]
    return text
