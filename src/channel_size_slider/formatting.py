"""Display helpers for sat amounts.  Presentation only, no state."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Any

from .constants import SATS_PER_BTC


def _to_fixed(value: float | Decimal, places: int) -> str:
    """Format *value* with exactly *places* decimals, rounding ties up."""
    exact = Decimal(value)
    quantum = Decimal(1).scaleb(-places)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, exact.adjusted() + places + 2)
        return str(exact.quantize(quantum, rounding=ROUND_HALF_UP))


def format_sats(sats: Any) -> str:
    """Human-readable sat amount: ``2.50M sats``, ``2.5k sats``, ``250 sats``.

    Anything that isn't a number renders as ``0 sats``, including strings
    with ``_`` digit separators and ints too large for a float.
    """
    if isinstance(sats, str) and "_" in sats:
        return "0 sats"
    try:
        num = float(sats)
    except (TypeError, ValueError, OverflowError):
        return "0 sats"
    if not math.isfinite(num):
        return "0 sats"

    if num >= 1_000_000:
        return _to_fixed(num / 1_000_000, 2) + "M sats"
    if num >= 1_000:
        return _to_fixed(num / 1_000, 1) + "k sats"

    if num.is_integer():
        return f"{int(num)} sats"
    return f"{num} sats"


def _btc_value(sats: int) -> float | Decimal:
    try:
        return sats / SATS_PER_BTC
    except OverflowError:
        with localcontext() as ctx:
            ctx.prec = len(str(abs(int(sats)))) + 10
            return Decimal(sats) / SATS_PER_BTC


def sats_to_btc(sats: int) -> str:
    """Convert *sats* to a BTC string with magnitude-dependent precision.

    >>> sats_to_btc(12_000_000)
    '0.120'
    >>> sats_to_btc(1_500_000)
    '0.0150'
    """
    btc = _btc_value(sats)
    if btc >= 0.1:
        return _to_fixed(btc, 3)
    if btc >= 0.01:
        return _to_fixed(btc, 4)
    if btc >= 0.001:
        return _to_fixed(btc, 5)
    return _to_fixed(btc, 6)


def format_grouped(sats: int) -> str:
    """Thousands-grouped integer, as shown in the text field (``1,234,567``)."""
    return f"{int(sats):,}"
