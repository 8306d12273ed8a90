"""Conversions between yuan and fen (hundredths of a yuan)."""

from decimal import ROUND_HALF_UP, Decimal

_CENT = Decimal("0.01")


def to_yuan(fen: int) -> float:
    """Convert an amount in fen to yuan as a float rounded to two places."""
    return float((Decimal(fen) / 100).quantize(_CENT, rounding=ROUND_HALF_UP))


def to_fen(amount: float) -> int:
    """Convert an amount in yuan to whole fen, rounding half away from zero."""
    scaled = Decimal(repr(float(amount))) * 100
    return int(scaled.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def to_int_yuan(fen: int) -> int:
    """Return the whole yuan in ``fen``, truncating toward zero."""
    whole = abs(fen) // 100
    return -whole if fen < 0 else whole