"""
Signal-Mind – Event Log
One event per simulated second, delivered to a pluggable sink:
    NoLog       – discard
    BufferedLog – keep in memory (for export after the run)
    StreamedLog – write straight to a CSV file, one line per second
"""

import csv
from dataclasses import dataclass

from config.settings import ALL_RED_APPROACH_ID, EVENT_CSV_HEADER


@dataclass(frozen=True)
class Event:
    time_sec: int
    approach_id: int | None     # None = all-red second
    vehicles_passed: int

    def as_row(self) -> tuple:
        approach_id = ALL_RED_APPROACH_ID if self.approach_id is None else self.approach_id
        return (self.time_sec, approach_id, self.vehicles_passed)


# ─────────────────────────────────────────────
# Sinks
# ─────────────────────────────────────────────
class NoLog:
    """Sink that drops every event."""

    def open(self):
        return self

    def emit(self, event: Event):
        pass

    def close(self):
        pass

    @property
    def events(self) -> list:
        return []

    def __enter__(self):
        return self.open()

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False


class BufferedLog(NoLog):
    """Keeps events in memory, in time order."""

    def __init__(self):
        self._events: list[Event] = []
        self.enabled = True

    def open(self):
        self._events = []
        self.enabled = True
        return self

    def emit(self, event: Event):
        if not self.enabled:
            return
        try:
            self._events.append(event)
        except MemoryError:
            # Give the memory back and carry on without an event log
            self._events = []
            self.enabled = False
            print("⚠️  Event buffer exhausted memory. Continuing without event log.")

    @property
    def events(self) -> list:
        return list(self._events)

    def __len__(self) -> int:
        return len(self._events)


class StreamedLog(NoLog):
    """Streams events to a CSV file as they happen; nothing is buffered."""

    def __init__(self, path: str):
        self.path = path
        self._fh = None
        self._writer = None
        self.lines_written = 0

    def open(self):
        try:
            self._fh = open(self.path, "w", newline="", buffering=1)
            self._writer = csv.writer(self._fh)
            self._writer.writerow(EVENT_CSV_HEADER)
        except OSError as e:
            print(f"⚠️  Cannot open log file {self.path} ({e}). Running without file log.")
            self._drop()
        return self

    def emit(self, event: Event):
        if self._writer is None:
            return
        try:
            self._writer.writerow(event.as_row())
            self.lines_written += 1
        except OSError as e:
            print(f"⚠️  Writing to {self.path} failed ({e}). Running without file log.")
            self._drop()

    def close(self):
        self._drop()

    @property
    def is_open(self) -> bool:
        return self._writer is not None

    def _drop(self):
        if self._fh is not None and not self._fh.closed:
            try:
                self._fh.close()
            except OSError as e:
                print(f"⚠️  Closing {self.path} failed ({e}).")
        self._fh = None
        self._writer = None


# ─────────────────────────────────────────────
# Export
# ─────────────────────────────────────────────
def export_csv(events, path: str) -> bool:
    """Write *events* to *path* with the standard header. Returns False on I/O failure."""
    try:
        with open(path, "w", newline="") as fh:
            writer = csv.writer(fh)
            writer.writerow(EVENT_CSV_HEADER)
            for event in events:
                writer.writerow(event.as_row())
    except OSError as e:
        print(f"⚠️  Could not export events to {path} ({e}).")
        return False
    print(f"📄 Events exported to {path}")
    return True
