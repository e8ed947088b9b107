import math


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, halves upward (2.5 -> 3, -2.5 -> -2).
    """
    return int(math.floor(value + 0.5))


def clamp(value: float, low: float = 0, high: float = 100) -> float:
    # NaN compares false against everything; treat it as the floor
    if math.isnan(value):
        return low
    return max(low, min(high, value))


def normalize_score(raw: float) -> int:
    """
    Clamp a raw weighted sum into [0, 100] and round it.

    Total for any float: NaN scores 0, infinities and overflowed
    sums land on the nearest bound.
    """
    return round_half_up(clamp(raw))
