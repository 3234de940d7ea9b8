"""Channel size slider: range, normalization and presenter for LSPS1 channel sizing"""

from .constants import (
    DEFAULT_CHANNEL_SIZE,
    DEFAULT_MAX_CHANNEL_SIZE,
    DEFAULT_MIN_CHANNEL_SIZE,
    HARD_MIN_CHANNEL_SIZE,
    MIN_STEP,
)
from .exceptions import ChannelSizeError, ConfigurationError
from .formatting import format_grouped, format_sats, sats_to_btc
from .normalizer import clamp, normalize_slider, normalize_text, parse_text
from .options import ChannelSizeOptions, load_options
from .presenter import ChannelSizeSlider, SliderView
from .range_resolver import EffectiveRange, derive_step, resolve_range

__all__ = [
    "ChannelSizeError",
    "ChannelSizeOptions",
    "ChannelSizeSlider",
    "ConfigurationError",
    "DEFAULT_CHANNEL_SIZE",
    "DEFAULT_MAX_CHANNEL_SIZE",
    "DEFAULT_MIN_CHANNEL_SIZE",
    "EffectiveRange",
    "HARD_MIN_CHANNEL_SIZE",
    "MIN_STEP",
    "SliderView",
    "clamp",
    "derive_step",
    "format_grouped",
    "format_sats",
    "load_options",
    "normalize_slider",
    "normalize_text",
    "parse_text",
    "resolve_range",
    "sats_to_btc",
]
__version__ = "0.1.0"
