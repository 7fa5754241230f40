# File: src/models/occurrence.py

import datetime
from dataclasses import dataclass

from .event import Event


@dataclass
class ProjectedOccurrence:
    """An event made concrete for one target date. Recomputed per render."""
    source: Event           # the stored record, untouched
    display: Event          # copy with date/start/end set for the target day
    effective_start: datetime.datetime
    effective_end: datetime.datetime

    @property
    def id(self) -> str:
        return self.source.id

    @property
    def start(self) -> str:
        return self.display.start

    @property
    def end(self) -> str:
        return self.display.end

    @property
    def date(self) -> datetime.date:
        return self.display.date

    def duration_minutes(self) -> int:
        """Minutes of the clipped interval."""
        return int((self.effective_end - self.effective_start).total_seconds() / 60)

    def to_dict(self) -> dict:
        data = self.display.to_dict()
        data['effective_start'] = self.effective_start.isoformat()
        data['effective_end'] = self.effective_end.isoformat()
        return data
