# File: src/services/event_store.py
"""
Event catalog file service.
Reads and writes the JSON event list exported by the dial app.
"""

import datetime
import json
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from dateutil.relativedelta import relativedelta

from src.core.config_manager import Config
from src.models import Event, event_from_dict
from src.utils.logger import setup_logger


class EventStore:
    """JSON-file backed event catalog."""

    def __init__(self, filepath: Path = Config.EVENTS_FILE):
        """
        Initialize the store.

        Args:
            filepath: Path to the catalog JSON file
        """
        self.filepath = Path(filepath)
        self.logger = setup_logger(__name__)

    def load(self) -> List[Event]:
        """
        Load events from the catalog file.

        Accepts a bare list of events or a backup object with an 'events'
        key. Records that cannot be parsed are skipped.

        Raises:
            FileNotFoundError: if the catalog file does not exist
        """
        if not self.filepath.exists():
            raise FileNotFoundError(f"Event catalog not found: {self.filepath}")

        with open(self.filepath, 'r', encoding='utf-8') as f:
            data = json.load(f)

        raw_events = data.get('events', []) if isinstance(data, dict) else data
        events: List[Event] = []
        for i, raw in enumerate(raw_events):
            try:
                events.append(event_from_dict(raw))
            except (ValueError, TypeError, AttributeError) as e:
                self.logger.warning(f"Skipping invalid event #{i} ({raw!r}): {e}")

        self.logger.info(f"Loaded {len(events)} events from {self.filepath}")
        return events

    def save(self, events: List[Event]) -> bool:
        """
        Write events to the catalog file.

        Returns:
            True if successful, False otherwise
        """
        try:
            self.filepath.parent.mkdir(parents=True, exist_ok=True)
            with open(self.filepath, 'w', encoding='utf-8') as f:
                json.dump([e.to_dict() for e in events], f, indent=2, ensure_ascii=False)
            self.logger.info(f"Saved {len(events)} events to {self.filepath}")
            return True
        except OSError as e:
            self.logger.error(f"Could not save events: {e}", exc_info=True)
            return False

    @staticmethod
    def upsert(events: List[Event], event: Event) -> List[Event]:
        """Replace the record with the same id, or append it."""
        if not any(e.id == event.id for e in events):
            return events + [event]
        return [replace(event) if e.id == event.id else e for e in events]

    @staticmethod
    def delete(events: List[Event], event_id: str) -> List[Event]:
        return [e for e in events if e.id != event_id]

    def cleanup(self, events: List[Event], months: Optional[int],
                today: Optional[datetime.date] = None) -> List[Event]:
        """
        Drop one-off events older than `months` months.

        Recurring events are always kept since they never go out of date.
        `months=None` clears everything.
        """
        if not months:
            self.logger.info(f"Clearing all {len(events)} events")
            return []

        today = today or datetime.date.today()
        cutoff = today - relativedelta(months=months)
        kept = [e for e in events if e.is_recurring or e.date > cutoff]

        self.logger.info(
            f"Cleanup before {cutoff.isoformat()}: kept {len(kept)}, "
            f"removed {len(events) - len(kept)}"
        )
        return kept
