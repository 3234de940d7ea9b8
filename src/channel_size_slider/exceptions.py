"""
Exception hierarchy for the channel size slider.

The widget itself never raises: bad input is ignored and bad configuration
degrades to defaults.  These exceptions only come out of the file-loading
helpers, so callers can catch broadly (``except ChannelSizeError``) or
narrowly (``except ConfigurationError``).
"""


class ChannelSizeError(Exception):
    """Base exception for all channel size slider errors."""


class ConfigurationError(ChannelSizeError):
    """Raised when an options file is structurally malformed."""
