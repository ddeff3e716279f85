"""
Signal-Mind – Metrics Tests
═══════════════════════════
Reduction over approach counters and the adaptive-vs-fixed verdicts.

Run: python -m pytest tests/test_metrics.py -v
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from analytics.metrics import (
    Metrics, compute_metrics, compare_metrics, generate_report, format_metrics,
)
from simulation.approach import Approach


# ─── helpers ────────────────────────────
def _approach(i, served=0, wait=0, cum_queue=0):
    a = Approach(i, f"A{i}", service_rate=2.0)
    a.total_served = served
    a.cumulative_wait = wait
    a.cum_queue_length = cum_queue
    return a


# ═══════════════════════════════════════════
# compute_metrics
# ═══════════════════════════════════════════

def test_reduction_over_counters():
    approaches = [_approach(1, served=10, wait=30, cum_queue=50),
                  _approach(2, served=30, wait=90, cum_queue=150)]
    m = compute_metrics(approaches, total_sim_time=100)
    assert m.throughput == 40
    assert m.avg_wait_time == pytest.approx(3.0)
    assert m.avg_queue_length == pytest.approx(1.0)


def test_no_throughput_means_zero_wait():
    m = compute_metrics([_approach(1, served=0, wait=500, cum_queue=20)], total_sim_time=10)
    assert m.throughput == 0
    assert m.avg_wait_time == 0.0
    assert m.avg_queue_length == pytest.approx(2.0)


def test_zero_horizon_or_no_approaches():
    assert compute_metrics([_approach(1, cum_queue=9)], total_sim_time=0).avg_queue_length == 0.0
    assert compute_metrics([], total_sim_time=100) == Metrics.zero()


def test_metrics_are_immutable():
    m = Metrics(1.0, 2, 3.0)
    with pytest.raises(Exception):
        m.throughput = 5


# ═══════════════════════════════════════════
# comparison
# ═══════════════════════════════════════════

def test_verdicts_follow_metric_direction():
    adaptive = Metrics(avg_wait_time=12.0, throughput=950, avg_queue_length=8.0)
    fixed = Metrics(avg_wait_time=20.0, throughput=900, avg_queue_length=6.0)
    assert compare_metrics(adaptive, fixed) == {
        "throughput": "adaptive",
        "avg_wait_time": "adaptive",
        "avg_queue_length": "fixed",
    }


def test_equal_values_tie():
    m = Metrics(avg_wait_time=5.0, throughput=100, avg_queue_length=2.5)
    assert set(compare_metrics(m, m).values()) == {"tie"}


def test_report_lists_both_columns():
    adaptive = Metrics(avg_wait_time=12.0, throughput=950, avg_queue_length=8.0)
    fixed = Metrics(avg_wait_time=12.0, throughput=900, avg_queue_length=9.0)
    report = generate_report(adaptive, fixed)
    assert "Adaptive" in report and "Fixed" in report
    assert "950" in report and "900" in report
    assert "Tie" in report


def test_format_single_run():
    text = format_metrics(Metrics(1.5, 42, 0.25), title="Fixed run")
    assert "Fixed run" in text
    assert "42 vehicles" in text


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))
