# src/payment_optimizer/money.py
# Fixed-point currency helpers. Everything is Decimal, 2 places, HALF_UP.
# Percentage steps keep two guard digits before the final rounding.

from decimal import Decimal, ROUND_HALF_UP

SCALE = 2
ROUNDING = ROUND_HALF_UP

ZERO = Decimal("0.00")
HUNDRED = Decimal("100")

_CENT = Decimal("0.01")
_GUARD = Decimal("0.0001")


def to_decimal(x):
    """Convert int/str/float/Decimal to Decimal without going through binary floats."""
    if x is None or isinstance(x, Decimal):
        return x
    if isinstance(x, bool):
        raise TypeError("bool is not an amount")
    return Decimal(str(x))


def q2(x):
    # Quantize to 2 decimal places with HALF_UP; absent values become 0.00
    if x is None:
        return ZERO
    return to_decimal(x).quantize(_CENT, rounding=ROUNDING)


def format_amount(x):
    return str(q2(x))


def _valid_percent(pct):
    return isinstance(pct, int) and not isinstance(pct, bool) and 0 <= pct <= 100


def _scaled(value, pct):
    # value * pct / 100 with guard digits, then finalized to scale
    raw = to_decimal(value) * Decimal(pct) / HUNDRED
    return q2(raw.quantize(_GUARD, rounding=ROUNDING))


def percentage(value, pct):
    """Return ``pct`` percent of ``value``, e.g. percentage(100, 10) == 10.00.

    Out-of-range ``pct`` or an absent ``value`` yields 0.00.
    """
    if value is None or not _valid_percent(pct):
        return ZERO
    return _scaled(value, pct)


def apply_discount(value, pct):
    """Return ``value`` reduced by ``pct`` percent, e.g. apply_discount(100, 10) == 90.00.

    Out-of-range ``pct`` returns ``value`` unchanged.
    """
    if value is None or not _valid_percent(pct):
        return value
    return _scaled(value, 100 - pct)


def discount_amount(value, pct):
    """Currency amount saved by applying ``pct`` percent off ``value``."""
    if value is None or not _valid_percent(pct):
        return ZERO
    return to_decimal(value) - apply_discount(value, pct)


def min_amount(a, b):
    if a is None:
        return b
    if b is None:
        return a
    return min(a, b)
