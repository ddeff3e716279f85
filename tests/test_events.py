"""
Signal-Mind – Event Log Tests
═════════════════════════════
Sinks, CSV export, and graceful degradation on I/O or memory failure.

Run: python -m pytest tests/test_events.py -v
"""

import sys
import os
import csv
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from simulation.events import Event, NoLog, BufferedLog, StreamedLog, export_csv


def _read_rows(path):
    with open(path, newline="") as fh:
        return list(csv.reader(fh))


def test_all_red_event_exports_sentinel():
    assert Event(4, None, 0).as_row() == (4, -1, 0)
    assert Event(5, 3, 2).as_row() == (5, 3, 2)


def test_no_log_discards():
    with NoLog() as sink:
        sink.emit(Event(0, 1, 1))
    assert sink.events == []


def test_buffered_log_keeps_order():
    with BufferedLog() as sink:
        for t in range(5):
            sink.emit(Event(t, 1, t))
    assert [e.time_sec for e in sink.events] == [0, 1, 2, 3, 4]
    assert len(sink) == 5


def test_buffered_log_survives_memory_exhaustion(capsys):
    class _Exploding(list):
        def append(self, item):
            raise MemoryError

    sink = BufferedLog().open()
    sink._events = _Exploding()
    sink.emit(Event(0, 1, 1))
    sink.emit(Event(1, 1, 1))
    assert not sink.enabled
    assert sink.events == []
    assert "Continuing without event log" in capsys.readouterr().out


def test_streamed_log_writes_header_and_lines(tmp_path):
    path = tmp_path / "log.csv"
    with StreamedLog(str(path)) as sink:
        sink.emit(Event(0, 2, 1))
        sink.emit(Event(1, None, 0))
    rows = _read_rows(path)
    assert rows == [["time_sec", "approach_id", "vehicles_passed"],
                    ["0", "2", "1"],
                    ["1", "-1", "0"]]
    assert sink.lines_written == 2
    assert sink.events == []


def test_streamed_log_unwritable_path_degrades(tmp_path, capsys):
    path = tmp_path / "missing" / "dir" / "log.csv"
    with StreamedLog(str(path)) as sink:
        assert not sink.is_open
        sink.emit(Event(0, 1, 1))
    assert not path.exists()
    assert "Running without file log" in capsys.readouterr().out


def test_export_csv(tmp_path):
    path = tmp_path / "events.csv"
    assert export_csv([Event(0, 1, 2), Event(1, None, 0)], str(path))
    assert _read_rows(path)[0] == ["time_sec", "approach_id", "vehicles_passed"]
    assert len(_read_rows(path)) == 3


def test_export_csv_failure_returns_false(tmp_path):
    assert not export_csv([Event(0, 1, 2)], str(tmp_path / "nope" / "events.csv"))
