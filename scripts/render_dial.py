"""
Dial preview entry point.
Prints the radial layout of one day from the event catalog.

Usage:
    python scripts/render_dial.py [YYYY-MM-DD] [--focus EVENT_ID] [--events PATH] [--json]
"""

import argparse
import datetime
import json
import sys
from pathlib import Path
from typing import List, Optional

import pytz

# Add project root to Python path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from src.core.config_manager import Config
from src.core.layout_engine import LayoutEngine
from src.models import DialLayout, Ring, parse_date, format_time_12
from src.services.event_store import EventStore
from src.utils.angle_math import angle_to_minutes
from src.utils.logger import setup_logger

logger = setup_logger(__name__)


def local_today() -> datetime.date:
    """Today's date on the configured wall clock."""
    local_tz = pytz.timezone(Config.TARGET_TIMEZONE)
    return datetime.datetime.now(local_tz).date()


def _clock(ring: Ring, angle: float) -> str:
    minutes = ring.offset_minutes + int(round(angle_to_minutes(angle)))
    return f"{(minutes // 60) % 24:02d}:{minutes % 60:02d}" if minutes < 1440 else "24:00"


def pretty_print_layout(layout: DialLayout) -> None:
    """Print a readable version of the dial layout, ring by ring."""
    print("\n" + "=" * 60)
    print(f"  DIAL FOR {layout.target_date.strftime('%A %Y-%m-%d')}"
          + ("  [FOCUS MODE]" if layout.focus_mode else ""))
    print("=" * 60)

    for ring in Ring:
        ring_layout = layout.rings[ring]
        print(f"\n--- {ring.value} ring ({ring_layout.track_count} tracks) ---")

        if not ring_layout.segments:
            print("  (free)")
        for seg in ring_layout.segments:
            start = format_time_12(_clock(ring, seg.start_angle))
            end = format_time_12(_clock(ring, seg.end_angle))
            marker = " ✓" if seg.completed else ""
            print(f"  {start:>8} - {end:<8} | track {seg.track} | "
                  f"{seg.start_angle:6.1f}° -> {seg.end_angle:6.1f}° | {seg.title}{marker}")

        for gap in ring_layout.gaps:
            print(f"  free {_clock(ring, gap.start_angle)}-{_clock(ring, gap.end_angle)}")

        for arc in ring_layout.blocked:
            print(f"  sleep {_clock(ring, arc.start_angle)}-{_clock(ring, arc.end_angle)}")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Print the radial day layout for a date.")
    parser.add_argument("date", nargs="?", help="Target date (YYYY-MM-DD), default today")
    parser.add_argument("--focus", help="Event id to highlight")
    parser.add_argument("--events", type=Path, default=Config.EVENTS_FILE,
                        help="Path to the event catalog JSON")
    parser.add_argument("--no-sleep", action="store_true", help="Do not draw the sleep window")
    parser.add_argument("--json", action="store_true", help="Emit the layout as JSON")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main execution function.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    args = parse_args(argv)

    try:
        if not Config.validate():
            logger.error("Configuration validation failed")
            return 1

        target_date = parse_date(args.date) if args.date else local_today()
        events = EventStore(args.events).load()

        sleep_window = None if args.no_sleep else (Config.SLEEP_START, Config.SLEEP_END)
        layout = LayoutEngine().build(events, target_date, args.focus, sleep_window)

        if args.json:
            print(json.dumps(layout.to_dict(), indent=2, ensure_ascii=False))
        else:
            pretty_print_layout(layout)
        return 0

    except FileNotFoundError as e:
        logger.error(f"Missing required file: {e}")
        return 1

    except ValueError as e:
        logger.error(f"Invalid input: {e}")
        return 1

    except Exception as e:
        logger.error("Unexpected fatal error", exc_info=True)
        logger.error(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
