"""
Signal-Mind – Signal Timing & Base Controller
Cycle timing parameters, the per-cycle green allocation, and the
abstract controller every allocation policy derives from.
"""

from dataclasses import dataclass

from config.settings import CYCLE_TIME, ALL_RED, MIN_GREEN, MAX_GREEN
from simulation.errors import ConfigError


@dataclass(frozen=True)
class TimingPlan:
    """Signal timing constraints, all in whole seconds."""

    cycle_time: int = CYCLE_TIME
    all_red: int = ALL_RED
    min_green: int = MIN_GREEN
    max_green: int = MAX_GREEN

    def __post_init__(self):
        for field_name in ("cycle_time", "all_red", "min_green", "max_green"):
            value = getattr(self, field_name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ConfigError(f"{field_name} must be a non-negative integer, got {value!r}")
        if self.cycle_time == 0:
            raise ConfigError("cycle_time must be positive")

    @property
    def available(self) -> int:
        """Green seconds left in a cycle once the all-red tail is taken out."""
        return max(0, self.cycle_time - self.all_red)

    def clamp(self, green: int) -> int:
        return max(self.min_green, min(self.max_green, green))

    def is_feasible(self, num_approaches: int) -> bool:
        return self.min_green * num_approaches <= self.available


class Allocation:
    """
    Green seconds per approach for one cycle, indexed by registry position.

    Slots are laid out back to back in registry order starting at second 0
    of the cycle; whatever is left of the cycle is all-red.
    """

    def __init__(self, greens, degenerate: bool = False):
        self.greens = [int(g) for g in greens]
        self.degenerate = degenerate   # timing was infeasible, min_green not honoured

    @property
    def total(self) -> int:
        return sum(self.greens)

    def slot_at(self, sec: int) -> int | None:
        """Registry index holding the green at *sec* within the cycle, or None for all-red."""
        running = 0
        for index, green in enumerate(self.greens):
            if running <= sec < running + green:
                return index
            running += green
        return None

    def __len__(self) -> int:
        return len(self.greens)

    def __iter__(self):
        return iter(self.greens)

    def __getitem__(self, index):
        return self.greens[index]

    def __eq__(self, other):
        if isinstance(other, Allocation):
            return self.greens == other.greens and self.degenerate == other.degenerate
        return self.greens == list(other)

    def __repr__(self):
        flag = ", degenerate" if self.degenerate else ""
        return f"Allocation({self.greens}{flag})"


# ─────────────────────────────────────────────
# Base controller
# ─────────────────────────────────────────────
class TrafficLightController:
    """
    Abstract base class for all green-time allocation policies.

    Subclasses implement allocate(); they must not mutate the approaches.
    RECOMPUTE_EACH_CYCLE tells the engine whether to call allocate() at
    every cycle boundary or only once at the start of a run.
    """

    NAME = "Base"
    RECOMPUTE_EACH_CYCLE = False

    def __init__(self, timing: TimingPlan | None = None):
        self.timing = timing or TimingPlan()

    def allocate(self, queues: list[int]) -> Allocation:
        """Override in subclasses."""
        raise NotImplementedError

    def allocate_for(self, approaches) -> Allocation:
        return self.allocate([a.queue for a in approaches])

    # ── shared residual correction ───────
    @staticmethod
    def _round_robin(greens: list[int], target: int, lower: int | None = None,
                     upper: int | None = None) -> list[int]:
        """
        Step greens one second at a time, index 0 first, until they sum to
        *target*. Approaches already at *lower* (when decrementing) or
        *upper* (when incrementing) are skipped while any other can move;
        a green never drops below zero.
        """
        n = len(greens)
        if n == 0:
            return greens
        index = 0
        diff = target - sum(greens)
        while diff != 0:
            step = 1 if diff > 0 else -1
            bound = upper if step > 0 else lower

            def movable(g, bound=bound, step=step):
                if step < 0 and g <= 0:
                    return False
                if bound is None:
                    return True
                return g < bound if step > 0 else g > bound

            if not any(movable(g) for g in greens):
                if step < 0 and not any(g > 0 for g in greens):
                    break
                bound = None
                if step > 0:
                    upper = None
                else:
                    lower = None
                continue

            if movable(greens[index]):
                greens[index] += step
                diff -= step
            index = (index + 1) % n
        return greens

    def __repr__(self):
        return f"{type(self).__name__}({self.timing})"
