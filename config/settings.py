"""
Signal-Mind: Configuration & Defaults
All constants, timing defaults, and tunable parameters in one place.
"""

from enum import Enum

# ─────────────────────────────────────────────
# STRATEGIES
# ─────────────────────────────────────────────
class Strategy(Enum):
    FIXED = "fixed"
    ADAPTIVE = "adaptive"


# ─────────────────────────────────────────────
# APPROACHES
# ─────────────────────────────────────────────
MAX_LANES = 4            # per approach; larger values are clamped
MIN_LANES = 1

# Default four-way scenario (vehicles / second)
DEFAULT_APPROACHES = [
    {"id": 1, "name": "North", "lanes": 2, "arrival_rate": 0.5, "service_rate": 2.0},
    {"id": 2, "name": "East",  "lanes": 2, "arrival_rate": 0.4, "service_rate": 2.0},
    {"id": 3, "name": "South", "lanes": 2, "arrival_rate": 0.6, "service_rate": 2.0},
    {"id": 4, "name": "West",  "lanes": 2, "arrival_rate": 0.3, "service_rate": 2.0},
]

# ─────────────────────────────────────────────
# SIGNAL TIMING (seconds)
# ─────────────────────────────────────────────
CYCLE_TIME = 120
ALL_RED = 5              # clearance tail at the end of every cycle
MIN_GREEN = 10
MAX_GREEN = 60

# ─────────────────────────────────────────────
# SIMULATION
# ─────────────────────────────────────────────
SIM_TIME = 600                   # seconds per run
DEFAULT_SEED = 42
ARRIVAL_MAX_ITERATIONS = 1000    # Poisson sampler safety bound

# ─────────────────────────────────────────────
# EVENT LOG / EXPORT
# ─────────────────────────────────────────────
ALL_RED_APPROACH_ID = -1
EVENT_CSV_HEADER = ("time_sec", "approach_id", "vehicles_passed")
DEFAULT_LOG_FILE = "simulation_log.csv"
DEFAULT_CSV_EXPORT = "events.csv"
DEFAULT_CHART_FILE = "queue_comparison.png"

# ─────────────────────────────────────────────
# CHART COLOURS
# ─────────────────────────────────────────────
CHART_COLOR_FIXED = "steelblue"
CHART_COLOR_ADAPTIVE = "orange"
