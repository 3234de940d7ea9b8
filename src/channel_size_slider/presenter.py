"""
Channel size slider presenter.

Toolkit-neutral model of the channel size input: a text field and a range
slider bound to one displayed value.  The host toolkit forwards input
events to the handlers and paints whatever :meth:`ChannelSizeSlider.render`
returns::

    slider = ChannelSizeSlider(
        channel_size=order.channel_size,
        set_channel_size=order.set_channel_size,
        options={"minChannelSize": "300000", "maxChannelSize": "16777216"},
    )
    slider.on_slider_change(2_000_000)
    slider.on_text_change("1,500,000")
    view = slider.render()

Every accepted event updates the displayed value first and then notifies
the owner, synchronously and without debouncing.  Rejected events (bad
text, or anything while disabled) change nothing and notify no one.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from .constants import DEFAULT_CHANNEL_SIZE, LABEL
from .formatting import format_grouped, sats_to_btc
from .normalizer import clamp, normalize_slider, normalize_text
from .options import ChannelSizeOptions
from .range_resolver import EffectiveRange, resolve_range

logger = logging.getLogger(__name__)

# Sentinel so update() can tell "not passed" from "passed None"
_UNSET: Any = object()


@dataclass(frozen=True)
class SliderView:
    """Snapshot of everything the host needs to paint the widget."""

    label: str
    text_value: str
    btc_label: str
    min_sats: int
    max_sats: int
    step: int
    value: int
    disabled: bool


class ChannelSizeSlider:
    """Linked text field and slider for picking a channel size in sats.

    Args:
        channel_size: Current value owned by the caller, or ``None``.
        set_channel_size: Called with the new value on every accepted change.
        options: Configured limits (:class:`ChannelSizeOptions` or a mapping).
        disabled: When ``True`` both input surfaces ignore user input.
    """

    def __init__(
        self,
        channel_size: int | None = None,
        set_channel_size: Callable[[int], None] | None = None,
        options: ChannelSizeOptions | Mapping[str, Any] | None = None,
        disabled: bool = False,
    ) -> None:
        self._set_channel_size = set_channel_size
        self._channel_size = channel_size
        self.disabled = disabled
        self._range = resolve_range(options)
        self._validated = self._validate_external()
        self._displayed = self._validated

    # -- State --------------------------------------------------------------

    @property
    def range(self) -> EffectiveRange:
        """The currently enforced range."""
        return self._range

    @property
    def displayed_value(self) -> int:
        """The value currently shown in both input surfaces."""
        return self._displayed

    # -- Owner-driven updates -----------------------------------------------

    def update(
        self,
        channel_size: int | None = _UNSET,
        options: ChannelSizeOptions | Mapping[str, Any] | None = _UNSET,
        disabled: bool = _UNSET,
    ) -> None:
        """Apply new props from the owner.

        Only the arguments passed are changed.  If the external value
        changes, or a new range clamps it differently, the displayed value
        is reset to it, discarding local edits.
        """
        external_changed = False
        if disabled is not _UNSET:
            self.disabled = disabled
        if options is not _UNSET:
            self._range = resolve_range(options)
            self._displayed = clamp(self._displayed, self._range)
        if channel_size is not _UNSET and channel_size != self._channel_size:
            self._channel_size = channel_size
            external_changed = True

        validated = self._validate_external()
        if external_changed or validated != self._validated:
            self._validated = validated
            self.reconcile()

    def reconcile(self) -> None:
        """Reset the displayed value to the owner's (validated) value."""
        if self._displayed != self._validated:
            logger.debug(
                "External value %d replaces displayed %d", self._validated, self._displayed
            )
        self._displayed = self._validated

    def _validate_external(self) -> int:
        return clamp(self._channel_size or DEFAULT_CHANNEL_SIZE, self._range)

    # -- User-driven updates ------------------------------------------------

    def on_slider_change(self, value: int) -> bool:
        """Handle a slider movement.  Returns ``True`` if it was accepted."""
        if self.disabled:
            logger.debug("Slider input %r ignored: widget disabled", value)
            return False
        self._accept(normalize_slider(value, self._range))
        return True

    def on_text_change(self, text: str) -> bool:
        """Handle a text field edit.  Returns ``True`` if it was accepted."""
        if self.disabled:
            logger.debug("Text input %r ignored: widget disabled", text)
            return False
        value = normalize_text(text, self._range)
        if value is None:
            logger.debug("Text input %r has no digits; keeping %d", text, self._displayed)
            return False
        self._accept(value)
        return True

    def _accept(self, value: int) -> None:
        self._displayed = value
        logger.debug("Channel size set to %d", value)
        if self._set_channel_size is not None:
            self._set_channel_size(value)

    # -- Rendering ----------------------------------------------------------

    def render(self) -> SliderView:
        """Return the current :class:`SliderView`."""
        return SliderView(
            label=LABEL,
            text_value=format_grouped(self._displayed),
            btc_label=f"{sats_to_btc(self._displayed)} BTC",
            min_sats=self._range.min_sats,
            max_sats=self._range.max_sats,
            step=self._range.step,
            value=self._displayed,
            disabled=self.disabled,
        )
