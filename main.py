#!/usr/bin/env python3
"""
Pressure Ink - Main Entry Point
Draws on a pen tablet or touchscreen and reports the outline of every stroke.
"""

import logging
import time
from pressure_ink.core.listener import InkListener


def print_outline(path):
    """Report a finished outline."""
    start = path.start_point
    print(f"   Closed outline from ({start[0]:.0f}, {start[1]:.0f}), "
          f"{len(path.flatten())} polygon vertices")


def main():
    """Main entry point for the ink listener."""
    logging.basicConfig(level=logging.INFO)
    listener = InkListener(on_outline=print_outline)

    if not listener.start():
        return

    try:
        while True:
            time.sleep(0.1)
    except KeyboardInterrupt:
        print("\n👋 Stopping...")
    finally:
        listener.stop()

if __name__ == "__main__":
    main()
