"""
Range resolution: configured limits in, enforced ``(min, max, step)`` out.

Pure functions of the options.  Nothing here raises; unusable
configuration degrades to defaults or to a single-position range.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .constants import HARD_MIN_CHANNEL_SIZE, MIN_STEP, TARGET_STEPS
from .options import ChannelSizeOptions, coerce_options

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EffectiveRange:
    """The range actually enforced by the slider, in sats."""

    min_sats: int
    max_sats: int
    step: int

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.min_sats <= value <= self.max_sats


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties away from zero for positives."""
    return math.floor(value + 0.5)


def derive_step(span: int) -> int:
    """Return a slider step for a range *span* sats wide.

    Aims for about :data:`TARGET_STEPS` positions, never finer than
    :data:`MIN_STEP`, then rounds to one significant digit so the
    increments read cleanly (23,400 -> 20,000; 110,848 -> 100,000).
    """
    raw_step = max(MIN_STEP, span // TARGET_STEPS)
    magnitude = 10 ** math.floor(math.log10(raw_step))
    return round_half_up(raw_step / magnitude) * magnitude


def resolve_range(
    options: ChannelSizeOptions | Mapping[str, Any] | None = None,
) -> EffectiveRange:
    """Resolve *options* into the :class:`EffectiveRange` the slider enforces.

    The minimum is never below :data:`HARD_MIN_CHANNEL_SIZE`, whatever the
    options say.  A maximum below that minimum collapses the range to the
    minimum alone.
    """
    opts = coerce_options(options)
    min_sats = max(HARD_MIN_CHANNEL_SIZE, opts.resolved_min())
    max_sats = opts.resolved_max()

    if max_sats < min_sats:
        logger.warning(
            "Configured max channel size %d is below the minimum %d; pinning range to %d",
            max_sats,
            min_sats,
            min_sats,
        )
        max_sats = min_sats

    step = derive_step(max_sats - min_sats)
    logger.debug("Resolved channel size range %d-%d step %d", min_sats, max_sats, step)
    return EffectiveRange(min_sats=min_sats, max_sats=max_sats, step=step)
