"""
Signal-Mind – Performance Metrics
Throughput, wait-time and queue-length reduction, plus the
adaptive-vs-fixed comparison report.
"""

from dataclasses import dataclass, asdict

import numpy as np


@dataclass(frozen=True)
class Metrics:
    avg_wait_time: float = 0.0      # seconds per served vehicle
    throughput: int = 0             # vehicles served
    avg_queue_length: float = 0.0   # time-averaged vehicles waiting per approach

    @classmethod
    def zero(cls) -> "Metrics":
        return cls()

    def as_dict(self) -> dict:
        return asdict(self)


def compute_metrics(approaches, total_sim_time: int) -> Metrics:
    """Reduce the counters left on *approaches* after a run into Metrics."""
    approaches = list(approaches)
    if not approaches:
        return Metrics.zero()

    served = np.array([a.total_served for a in approaches], dtype=np.int64)
    waits = np.array([a.cumulative_wait for a in approaches], dtype=np.int64)
    queued = np.array([a.cum_queue_length for a in approaches], dtype=np.int64)

    throughput = int(served.sum())
    avg_wait = float(waits.sum()) / throughput if throughput else 0.0

    samples = total_sim_time * len(approaches)
    avg_queue = float(queued.sum()) / samples if total_sim_time > 0 else 0.0

    return Metrics(avg_wait_time=avg_wait, throughput=throughput, avg_queue_length=avg_queue)


# ─── comparison ───────────────────────
# metric name → True when higher is better
_HIGHER_IS_BETTER = {
    "throughput": True,
    "avg_wait_time": False,
    "avg_queue_length": False,
}


def compare_metrics(adaptive: Metrics, fixed: Metrics) -> dict:
    """
    Returns metric name → "adaptive", "fixed" or "tie".
    Higher throughput wins; lower wait and queue win.
    """
    verdicts = {}
    for name, higher_better in _HIGHER_IS_BETTER.items():
        a, f = getattr(adaptive, name), getattr(fixed, name)
        if a == f:
            verdicts[name] = "tie"
        elif (a > f) == higher_better:
            verdicts[name] = "adaptive"
        else:
            verdicts[name] = "fixed"
    return verdicts


def _pct(old, new) -> float:
    if old == 0:
        return 0.0
    return ((new - old) / abs(old)) * 100


def generate_report(adaptive: Metrics, fixed: Metrics) -> str:
    verdicts = compare_metrics(adaptive, fixed)
    labels = {"adaptive": "Adaptive", "fixed": "Fixed", "tie": "Tie"}
    lines = [
        "═" * 62,
        " Signal-Mind — Adaptive vs Fixed",
        "═" * 62,
        f"  {'Metric':<20}{'Adaptive':>11}{'Fixed':>11}{'Change':>9}  Better",
        "─" * 62,
        f"  {'Throughput (veh)':<20}{adaptive.throughput:>11d}{fixed.throughput:>11d}"
        f"{_pct(fixed.throughput, adaptive.throughput):>8.1f}%  {labels[verdicts['throughput']]}",
        f"  {'Avg wait (s/veh)':<20}{adaptive.avg_wait_time:>11.2f}{fixed.avg_wait_time:>11.2f}"
        f"{_pct(fixed.avg_wait_time, adaptive.avg_wait_time):>8.1f}%  {labels[verdicts['avg_wait_time']]}",
        f"  {'Avg queue (veh)':<20}{adaptive.avg_queue_length:>11.2f}{fixed.avg_queue_length:>11.2f}"
        f"{_pct(fixed.avg_queue_length, adaptive.avg_queue_length):>8.1f}%  {labels[verdicts['avg_queue_length']]}",
        "═" * 62,
    ]
    return "\n".join(lines)


def format_metrics(metrics: Metrics, title: str = "Run") -> str:
    lines = [
        "═" * 50,
        f" Signal-Mind — {title}",
        "═" * 50,
        f"  Throughput         : {metrics.throughput} vehicles",
        f"  Avg wait time      : {metrics.avg_wait_time:.2f} s / vehicle",
        f"  Avg queue length   : {metrics.avg_queue_length:.2f} vehicles",
        "═" * 50,
    ]
    return "\n".join(lines)
