"""
Score arithmetic shared by the evaluators and the report aggregator.
"""

import math


def clamp(value: float, low: float, high: float) -> float:
    """Clamp a value into [low, high]."""
    return max(low, min(high, value))


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (6.5 -> 7)."""
    return math.floor(value + 0.5)
