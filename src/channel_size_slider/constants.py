"""Shared constants for the channel size slider.

This is the canonical source of truth for channel size limits and widget
defaults.  Other modules should import from here rather than defining
their own copies.
"""

# ---------------------------------------------------------------------------
# Configuration defaults
# ---------------------------------------------------------------------------

DEFAULT_MIN_CHANNEL_SIZE = 100_000
DEFAULT_MAX_CHANNEL_SIZE = 16_777_216  # 2**24 sats, the pre-wumbo channel limit

# ---------------------------------------------------------------------------
# Range / step policy
# ---------------------------------------------------------------------------

HARD_MIN_CHANNEL_SIZE = 150_000  # Applied on top of any configured minimum
MIN_STEP = 10_000
TARGET_STEPS = 150

# ---------------------------------------------------------------------------
# Presenter defaults
# ---------------------------------------------------------------------------

DEFAULT_CHANNEL_SIZE = 1_000_000
SATS_PER_BTC = 100_000_000
LABEL = "Channel Size (satoshis):"
