#!/usr/bin/env python3
"""
Channel Size CLI — Interactive harness for the channel size slider.

Drives a :class:`ChannelSizeSlider` from the terminal the way the LSPS1
order page would: slider drags, text edits, owner-side value changes, and
disabling the widget while an order is in flight.

Usage:
    python scripts/channel_size_cli.py
    python scripts/channel_size_cli.py --config config/channel_size.yaml
    python scripts/channel_size_cli.py --min 300000 --max 5000000 --channel-size 2000000
"""

from __future__ import annotations

import argparse
import logging
import sys

# Add src to path so we can import without installing
sys.path.insert(0, "src")

from channel_size_slider import (
    ChannelSizeError,
    ChannelSizeOptions,
    ChannelSizeSlider,
    format_sats,
    load_options,
)

# ═══════════════════════════════════════
#  Terminal helpers
# ═══════════════════════════════════════


class C:
    """ANSI color codes (no-op on non-TTY)."""

    if sys.stdout.isatty():
        BOLD = "\033[1m"
        DIM = "\033[2m"
        GREEN = "\033[32m"
        YELLOW = "\033[33m"
        RED = "\033[31m"
        CYAN = "\033[36m"
        RESET = "\033[0m"
    else:
        BOLD = DIM = GREEN = YELLOW = RED = CYAN = RESET = ""


def banner(text: str) -> None:
    print(f"\n{C.BOLD}{'═' * 60}")
    print(f"  {text}")
    print(f"{'═' * 60}{C.RESET}")


def info(text: str) -> None:
    print(f"  {C.GREEN}✓{C.RESET} {text}")


def warn(text: str) -> None:
    print(f"  {C.YELLOW}⚠{C.RESET} {text}")


def error(text: str) -> None:
    print(f"  {C.RED}✗{C.RESET} {text}")


def prompt(text: str, default: str = "") -> str:
    suffix = f" [{default}]" if default else ""
    try:
        val = input(f"  {text}{suffix}: ").strip()
    except EOFError:
        return default
    return val if val else default


def prompt_int(text: str, default: int | None = None) -> int | None:
    """Prompt for an integer.  Returns None on empty input with no default."""
    raw = prompt(text, str(default) if default is not None else "")
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        error(f"Invalid number: {raw}")
        return None


# ═══════════════════════════════════════
#  Owner stand-in
# ═══════════════════════════════════════


class Order:
    """Plays the part of the order page that owns the channel size."""

    def __init__(self, channel_size: int | None) -> None:
        self.channel_size = channel_size
        self.notifications = 0

    def set_channel_size(self, value: int) -> None:
        self.channel_size = value
        self.notifications += 1
        print(f"    {C.DIM}owner notified: {value:,} sats{C.RESET}")


# ═══════════════════════════════════════
#  Menu actions
# ═══════════════════════════════════════


def show(slider: ChannelSizeSlider) -> None:
    """Print the widget the way the page would paint it."""
    view = slider.render()
    state = f"{C.DIM}disabled{C.RESET}" if view.disabled else f"{C.GREEN}enabled{C.RESET}"
    print(f"\n  {view.label} [{view.text_value}]  {view.btc_label}   ({state})")

    width = 40
    span = max(view.max_sats - view.min_sats, 1)
    pos = round((view.value - view.min_sats) / span * width)
    bar = "━" * pos + "●" + "─" * (width - pos)
    print(f"  {format_sats(view.min_sats):>12s} {C.CYAN}{bar}{C.RESET} {format_sats(view.max_sats)}")


def do_slide(slider: ChannelSizeSlider, order: Order) -> None:
    """Move the slider to a position."""
    rng = slider.range
    value = prompt_int(f"Slider position ({rng.min_sats}-{rng.max_sats})", slider.displayed_value)
    if value is None:
        return
    if slider.on_slider_change(value):
        info(f"Slider moved to {slider.displayed_value:,} sats")
    else:
        warn("Slider is disabled")


def do_type(slider: ChannelSizeSlider, order: Order) -> None:
    """Type into the text field."""
    text = prompt("Text field", slider.render().text_value)
    if slider.on_text_change(text):
        info(f"Text accepted as {slider.displayed_value:,} sats")
    elif slider.disabled:
        warn("Text field is disabled")
    else:
        warn(f"No digits in {text!r}; value unchanged")


def do_external(slider: ChannelSizeSlider, order: Order) -> None:
    """Change the value from the owner's side."""
    value = prompt_int("Owner channel size (0 = unset)", order.channel_size or 0)
    if value is None:
        return
    order.channel_size = value or None
    slider.update(channel_size=order.channel_size)
    info(f"Owner value applied; displayed {slider.displayed_value:,} sats")


def do_toggle(slider: ChannelSizeSlider, order: Order) -> None:
    """Enable or disable both input surfaces."""
    slider.update(disabled=not slider.disabled)
    info("Widget disabled" if slider.disabled else "Widget enabled")


def do_range(slider: ChannelSizeSlider, order: Order) -> None:
    """Print the resolved range."""
    banner("Effective Range")
    rng = slider.range
    print(f"  Min:   {rng.min_sats:>12,} sats  ({format_sats(rng.min_sats)})")
    print(f"  Max:   {rng.max_sats:>12,} sats  ({format_sats(rng.max_sats)})")
    print(f"  Step:  {rng.step:>12,} sats")
    print(f"  Notifications sent: {order.notifications}")


# ═══════════════════════════════════════
#  Main loop
# ═══════════════════════════════════════

MENU = [
    ("1", "Slide", "Drag the slider to a position"),
    ("2", "Type", "Edit the text field"),
    ("3", "Owner Value", "Change the value from the order page"),
    ("4", "Toggle", "Enable / disable the widget"),
    ("5", "Range", "Show the effective range and step"),
    ("q", "Quit", "Exit"),
]

ACTIONS = {
    "1": do_slide,
    "2": do_type,
    "3": do_external,
    "4": do_toggle,
    "5": do_range,
}


def main_menu() -> None:
    line = "─" * 50
    print(f"\n{C.BOLD}  Channel Size Menu{C.RESET}")
    print(f"  {C.DIM}{line}{C.RESET}")
    for key, label, desc in MENU:
        print(f"    {C.CYAN}{key}{C.RESET})  {label:16s} {C.DIM}— {desc}{C.RESET}")
    print()


def build_options(args: argparse.Namespace) -> ChannelSizeOptions:
    """Options from --config, with --min / --max taking precedence."""
    options = load_options(args.config) if args.config else ChannelSizeOptions()
    return ChannelSizeOptions(
        min_channel_size=args.min if args.min is not None else options.min_channel_size,
        max_channel_size=args.max if args.max is not None else options.max_channel_size,
    )


def main() -> None:
    parser = argparse.ArgumentParser(description="Interactive channel size slider harness")
    parser.add_argument("--config", help="YAML options file (minChannelSize / maxChannelSize)")
    parser.add_argument("--min", help="Configured minimum channel size (sats)")
    parser.add_argument("--max", help="Configured maximum channel size (sats)")
    parser.add_argument("--channel-size", type=int, help="Initial owner value (sats)")
    parser.add_argument("--disabled", action="store_true", help="Start with the widget disabled")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
    )

    try:
        options = build_options(args)
    except (ChannelSizeError, FileNotFoundError) as exc:
        error(f"Cannot load options: {exc}")
        sys.exit(1)

    order = Order(args.channel_size)
    slider = ChannelSizeSlider(
        channel_size=order.channel_size,
        set_channel_size=order.set_channel_size,
        options=options,
        disabled=args.disabled,
    )

    banner("Channel Size Slider Harness")
    rng = slider.range
    print(f"  Range {rng.min_sats:,} - {rng.max_sats:,} sats, step {rng.step:,}")

    try:
        while True:
            show(slider)
            main_menu()
            choice = prompt("Choice", "q").lower()

            if choice == "q":
                break

            action = ACTIONS.get(choice)
            if action:
                action(slider, order)
            else:
                error(f"Unknown option: {choice}")

    except KeyboardInterrupt:
        print(f"\n\n  {C.YELLOW}Interrupted!{C.RESET}")

    finally:
        print()
        if order.channel_size is not None:
            info(f"Final channel size: {order.channel_size:,} sats")
        info("Goodbye!")


if __name__ == "__main__":
    main()
