#!/usr/bin/env python3
"""
Example usage of the channel size slider module

This script demonstrates:
- Resolving a range from LSP-advertised options
- Wiring the presenter to an owner callback
- Slider and text input
- Owner-side value changes overriding local edits
"""

import sys

# Add src to path so we can import channel_size_slider
sys.path.insert(0, "src")

from channel_size_slider import ChannelSizeSlider, format_sats, resolve_range


def main():
    """Run example channel sizing sequence"""

    print("Channel Size Slider - Example Usage")
    print("=" * 60)

    # Options as an LSP would advertise them: strings, possibly too small
    options = {"minChannelSize": "50000", "maxChannelSize": "16777216"}
    rng = resolve_range(options)
    print("\nEffective range:")
    print(f"  Min:   {format_sats(rng.min_sats)}  (configured 50,000 raised to the floor)")
    print(f"  Max:   {format_sats(rng.max_sats)}")
    print(f"  Step:  {rng.step:,} sats")

    chosen = []
    slider = ChannelSizeSlider(set_channel_size=chosen.append, options=options)

    # Example 1: Initial value
    print("\n" + "=" * 60)
    print("Example 1: No owner value, so the widget starts at 1M sats")
    view = slider.render()
    print(f"  {view.label} {view.text_value}  ({view.btc_label})")

    # Example 2: Drag the slider
    print("\n" + "=" * 60)
    print("Example 2: Drag the slider to 2.5M sats")
    slider.on_slider_change(2_500_000)
    print(f"✓ Displayed {format_sats(slider.displayed_value)}, owner saw {chosen[-1]:,}")

    # Example 3: Type with separators and junk
    print("\n" + "=" * 60)
    print("Example 3: Type '1,234,567abc' into the text field")
    slider.on_text_change("1,234,567abc")
    print(f"✓ Parsed as {slider.displayed_value:,} sats")

    # Example 4: Garbage is ignored
    print("\n" + "=" * 60)
    print("Example 4: Type 'abc' into the text field")
    accepted = slider.on_text_change("abc")
    print(f"  Accepted: {accepted}, still {slider.displayed_value:,} sats")

    # Example 5: Owner wins
    print("\n" + "=" * 60)
    print("Example 5: The order page resets the value to 5M sats")
    slider.update(channel_size=5_000_000)
    print(f"✓ Displayed {slider.render().text_value} sats")

    print("\n" + "=" * 60)
    print("Example complete!")
    print(f"\nOwner received {len(chosen)} notifications: {chosen}")


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        print("\n\nInterrupted by user")
    except Exception as e:
        print(f"\nError: {e}")
        sys.exit(1)
