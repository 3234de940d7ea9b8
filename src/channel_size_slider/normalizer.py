"""
Value normalization: turn candidate input into an in-range channel size.

Text from the field may contain grouping separators, units or garbage;
slider values are always integers.  Both end up clamped to the
:class:`~channel_size_slider.range_resolver.EffectiveRange`.
"""

from __future__ import annotations

import re

from .range_resolver import EffectiveRange

_NON_DIGITS = re.compile(r"[^0-9]")


def clamp(value: int, rng: EffectiveRange) -> int:
    """Return *value* limited to ``[rng.min_sats, rng.max_sats]``."""
    return min(max(value, rng.min_sats), rng.max_sats)


def _digits(text: str) -> str:
    """Digits of *text* without leading zeros (``"0"`` for all zeros, ``""`` for none)."""
    digits = _NON_DIGITS.sub("", text or "")
    if not digits:
        return ""
    return digits.lstrip("0") or "0"


def parse_text(text: str) -> int | None:
    """Strip every non-digit from *text* and parse what's left.

    ``"1,234,567abc"`` gives ``1234567``.  Returns ``None`` when no digits
    remain, or when there are too many to convert to an int.
    """
    digits = _digits(text)
    if not digits:
        return None
    try:
        return int(digits)
    except ValueError:
        return None


def normalize_text(text: str, rng: EffectiveRange) -> int | None:
    """Parse and clamp text-field input; ``None`` means "keep the old value"."""
    digits = _digits(text)
    if not digits:
        return None
    # Longer than the maximum means larger than it; skip the conversion
    if len(digits) > len(str(rng.max_sats)):
        return rng.max_sats
    return clamp(int(digits), rng)


def normalize_slider(value: int, rng: EffectiveRange) -> int:
    """Clamp a slider position."""
    return clamp(int(value), rng)
