"""
Signal-Mind – Charts
Queue-over-time comparison of the two strategies, saved as a PNG.
"""

import os

import matplotlib
matplotlib.use("Agg")  # non-interactive backend
import matplotlib.pyplot as plt
import numpy as np

from config.settings import CHART_COLOR_FIXED, CHART_COLOR_ADAPTIVE, CYCLE_TIME


def plot_queue_comparison(fixed_queue, adaptive_queue, path: str,
                          cycle_time: int = CYCLE_TIME, window: int = 10) -> str:
    """Save total-queue-per-second curves for both strategies."""
    fixed_queue = np.asarray(fixed_queue)
    adaptive_queue = np.asarray(adaptive_queue)

    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    plt.figure(figsize=(10, 5))
    for series, color, label in (
        (fixed_queue, CHART_COLOR_FIXED, "Fixed"),
        (adaptive_queue, CHART_COLOR_ADAPTIVE, "Adaptive"),
    ):
        plt.plot(series, alpha=0.3, color=color)
        # Smoothed (running avg)
        if len(series) >= window:
            smoothed = np.convolve(series, np.ones(window) / window, mode="valid")
            plt.plot(range(window - 1, len(series)), smoothed, color=color,
                     linewidth=2, label=f"{label} (avg {window}s)")
        else:
            plt.plot(series, color=color, linewidth=2, label=label)

    # Cycle boundaries
    horizon = max(len(fixed_queue), len(adaptive_queue))
    for t in range(cycle_time, horizon, cycle_time):
        plt.axvline(t, color="grey", linewidth=0.5, linestyle=":")

    plt.xlabel("Time (s)")
    plt.ylabel("Vehicles queued (all approaches)")
    plt.title("Signal-Mind — Queue Length: Adaptive vs Fixed")
    plt.legend()
    plt.tight_layout()
    plt.savefig(path, dpi=150)
    plt.close()
    print(f"📈 Queue chart saved to {path}")
    return path
