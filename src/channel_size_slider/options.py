"""
Channel size options: the typed configuration behind the slider range.

Hosts hand the widget whatever the LSP advertised, usually a loosely typed
mapping where the limits may be numbers, numeric strings, or missing
entirely.  This module turns that into a :class:`ChannelSizeOptions` and
fills in defaults, so the rest of the package never inspects raw types::

    from channel_size_slider.options import ChannelSizeOptions, load_options

    options = ChannelSizeOptions.from_mapping({"minChannelSize": "300000"})
    options = load_options("config/channel_size.yaml")
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from .constants import DEFAULT_MAX_CHANNEL_SIZE, DEFAULT_MIN_CHANNEL_SIZE
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# Leading optional whitespace and sign, then digits; the rest is ignored.
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

# Wire name (as advertised by the LSP) -> attribute name
_KEY_ALIASES = {
    "minChannelSize": "min_channel_size",
    "maxChannelSize": "max_channel_size",
    "min_channel_size": "min_channel_size",
    "max_channel_size": "max_channel_size",
}


def parse_int_like(value: Any) -> int | None:
    """Parse the leading base-10 integer out of *value*.

    Accepts ints, floats and strings.  ``"300000"`` and ``"300000 sats"``
    both give ``300000``; ``"abc"``, ``None`` and booleans give ``None``.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        return int(value)
    match = _LEADING_INT.match(str(value))
    if match is None:
        return None
    try:
        return int(match.group(1))
    except ValueError:
        # Past the interpreter's int string-conversion limit
        logger.debug("Integer in %d-character value too long to convert", len(match.group(1)))
        return None


@dataclass(frozen=True)
class ChannelSizeOptions:
    """Configured channel size limits, as supplied by the host.

    Either field may be ``None`` (not configured) or an unparsed value; use
    :meth:`resolved_min` / :meth:`resolved_max` to get integers with the
    defaults applied.
    """

    min_channel_size: Any = None
    max_channel_size: Any = None

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any] | None) -> ChannelSizeOptions:
        """Build options from a host mapping, ignoring keys it doesn't know."""
        if not raw:
            return cls()
        fields: dict[str, Any] = {}
        for key, value in raw.items():
            attr = _KEY_ALIASES.get(key)
            if attr is not None:
                fields[attr] = value
        return cls(**fields)

    def resolved_min(self) -> int:
        """Configured minimum as an int, or :data:`DEFAULT_MIN_CHANNEL_SIZE`."""
        return _with_default(self.min_channel_size, DEFAULT_MIN_CHANNEL_SIZE, "min_channel_size")

    def resolved_max(self) -> int:
        """Configured maximum as an int, or :data:`DEFAULT_MAX_CHANNEL_SIZE`."""
        return _with_default(self.max_channel_size, DEFAULT_MAX_CHANNEL_SIZE, "max_channel_size")


def coerce_options(options: ChannelSizeOptions | Mapping[str, Any] | None) -> ChannelSizeOptions:
    """Return *options* as a :class:`ChannelSizeOptions` (``None`` -> defaults)."""
    if isinstance(options, ChannelSizeOptions):
        return options
    return ChannelSizeOptions.from_mapping(options)


def _with_default(value: Any, default: int, label: str) -> int:
    # Unset, empty and zero all mean "not configured"
    if not value:
        return default
    parsed = parse_int_like(value)
    if parsed is None:
        logger.debug("Ignoring unparseable %s %r; using %d", label, value, default)
        return default
    return parsed


# ---------------------------------------------------------------------------
# File loading
# ---------------------------------------------------------------------------


def load_options(path: str | Path) -> ChannelSizeOptions:
    """Load channel size options from a YAML file.

    The file is a flat mapping using either the wire names or the
    snake_case names::

        minChannelSize: 300000
        maxChannelSize: 16777216

    An empty file means "all defaults".  Individual values are not
    validated here; unparseable ones fall back to defaults when the range
    is resolved.

    Raises:
        FileNotFoundError: If *path* does not exist.
        ConfigurationError: If the file is not a mapping or has unknown keys.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Options file not found: {path}")

    with open(path) as f:
        try:
            raw = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise ConfigurationError(f"Cannot parse {path}: {exc}") from exc

    if raw is None:
        logger.info("Options file %s is empty; using defaults", path)
        return ChannelSizeOptions()

    if not isinstance(raw, dict):
        raise ConfigurationError(
            f"Options file must be a YAML mapping, got {type(raw).__name__}"
        )

    unknown = sorted(str(k) for k in raw if k not in _KEY_ALIASES)
    if unknown:
        raise ConfigurationError(
            f"Unknown option(s) {unknown}; expected one of {sorted(_KEY_ALIASES)}"
        )

    options = ChannelSizeOptions.from_mapping(raw)
    logger.info("Loaded channel size options from %s: %s", path, options)
    return options
