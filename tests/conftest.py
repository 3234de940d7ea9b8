"""Shared pytest fixtures for channel size slider tests."""

from __future__ import annotations

import pytest

from channel_size_slider import ChannelSizeSlider


class RecordingOwner:
    """Lightweight stand-in for the page that owns the channel size.

    Records every value passed to :meth:`set_channel_size`, and snapshots
    the slider's displayed value at the moment of each notification so
    tests can check the update-then-notify ordering.
    """

    def __init__(self) -> None:
        self.values: list[int] = []
        self.displayed_at_notify: list[int] = []
        self.slider: ChannelSizeSlider | None = None

    def set_channel_size(self, value: int) -> None:
        self.values.append(value)
        if self.slider is not None:
            self.displayed_at_notify.append(self.slider.displayed_value)

    @property
    def last(self) -> int | None:
        return self.values[-1] if self.values else None


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def owner() -> RecordingOwner:
    """Return a fresh ``RecordingOwner``."""
    return RecordingOwner()


@pytest.fixture()
def slider(owner: RecordingOwner) -> ChannelSizeSlider:
    """Return a slider with default options and no owner value."""
    widget = ChannelSizeSlider(set_channel_size=owner.set_channel_size)
    owner.slider = widget
    return widget


@pytest.fixture()
def disabled_slider(owner: RecordingOwner) -> ChannelSizeSlider:
    """Return a disabled slider starting at 2M sats."""
    widget = ChannelSizeSlider(
        channel_size=2_000_000,
        set_channel_size=owner.set_channel_size,
        disabled=True,
    )
    owner.slider = widget
    return widget
