"""
Signal-Mind – Approach Registry
Defines Approach (one inflow to the intersection) and the ordered
registry that owns every approach and its live counters.
"""

from dataclasses import dataclass, asdict

from config.settings import MIN_LANES, MAX_LANES
from simulation.errors import ConfigError, ApproachNotFoundError, DuplicateApproachError


def clamp_lanes(lanes: int) -> int:
    return max(MIN_LANES, min(MAX_LANES, int(lanes)))


@dataclass(frozen=True)
class ApproachSnapshot:
    """Read-only copy of an approach, handed out by ApproachRegistry.list_approaches()."""

    id: int
    name: str
    lanes: int
    arrival_rate: float
    service_rate: float
    queue: int
    cumulative_wait: int
    total_arrived: int
    total_served: int
    cum_queue_length: int

    def as_dict(self) -> dict:
        return asdict(self)


class Approach:
    """One directional inflow with its configuration and run counters."""

    def __init__(self, approach_id: int, name: str, lanes: int = 1,
                 arrival_rate: float = 0.0, service_rate: float = 0.0):
        if isinstance(approach_id, bool) or not isinstance(approach_id, int):
            raise ConfigError(f"approach id must be an integer, got {approach_id!r}")
        self.id = approach_id
        self.name = name
        self.lanes = clamp_lanes(lanes)
        self.arrival_rate = max(0.0, float(arrival_rate))
        self.service_rate = max(0.0, float(service_rate))

        # Counters (mutated only by the engine during a run)
        self.queue = 0
        self.cumulative_wait = 0
        self.total_arrived = 0
        self.total_served = 0
        self.cum_queue_length = 0

    @classmethod
    def from_config(cls, cfg: dict) -> "Approach":
        try:
            return cls(
                cfg["id"],
                str(cfg.get("name", f"Approach {cfg['id']}")),
                lanes=cfg.get("lanes", 1),
                arrival_rate=cfg.get("arrival_rate", 0.0),
                service_rate=cfg.get("service_rate", 0.0),
            )
        except KeyError as e:
            raise ConfigError(f"approach config is missing {e}") from e
        except (TypeError, ValueError) as e:
            raise ConfigError(f"bad approach config {cfg!r}: {e}") from e

    def reset_counters(self):
        self.queue = 0
        self.cumulative_wait = 0
        self.total_arrived = 0
        self.total_served = 0
        self.cum_queue_length = 0

    @property
    def capacity(self) -> int:
        """Vehicles that can be served in one green second."""
        return int(self.service_rate)

    def snapshot(self) -> ApproachSnapshot:
        return ApproachSnapshot(
            id=self.id,
            name=self.name,
            lanes=self.lanes,
            arrival_rate=self.arrival_rate,
            service_rate=self.service_rate,
            queue=self.queue,
            cumulative_wait=self.cumulative_wait,
            total_arrived=self.total_arrived,
            total_served=self.total_served,
            cum_queue_length=self.cum_queue_length,
        )

    def __repr__(self):
        return (f"Approach(id={self.id}, name={self.name!r}, lanes={self.lanes}, "
                f"queue={self.queue})")


class ApproachRegistry:
    """
    Ordered collection of approaches, keyed by id.

    Order matters: the engine walks approaches in registry order when
    laying green slots out inside a cycle.
    """

    def __init__(self, approaches=None):
        self._approaches: list[Approach] = []
        for approach in approaches or ():
            self.add(approach)

    @classmethod
    def from_configs(cls, configs) -> "ApproachRegistry":
        return cls(Approach.from_config(cfg) for cfg in configs)

    # ── editing ──────────────────────────
    def add(self, approach: Approach):
        if approach.id <= 0:
            raise ConfigError(f"approach id must be a positive integer, got {approach.id}")
        if approach.id in self:
            raise DuplicateApproachError(approach.id)
        self._approaches.append(approach)

    def remove(self, approach_id: int) -> Approach:
        index = self.find(approach_id)
        return self._approaches.pop(index)

    def edit(self, approach_id: int, name: str | None = None, lanes: int | None = None,
             arrival_rate: float | None = None, service_rate: float | None = None):
        """Update an approach in place. Negative rates are ignored, lanes are clamped."""
        approach = self.get(approach_id)
        if name is not None:
            approach.name = name
        if lanes is not None:
            approach.lanes = clamp_lanes(lanes)
        if arrival_rate is not None and arrival_rate >= 0:
            approach.arrival_rate = float(arrival_rate)
        if service_rate is not None and service_rate >= 0:
            approach.service_rate = float(service_rate)
        return approach

    # ── lookup ───────────────────────────
    def find(self, approach_id: int) -> int:
        """Return the position of *approach_id* in registry order."""
        for index, approach in enumerate(self._approaches):
            if approach.id == approach_id:
                return index
        raise ApproachNotFoundError(approach_id)

    def get(self, approach_id: int) -> Approach:
        return self._approaches[self.find(approach_id)]

    def list_approaches(self):
        """Lazily yield a snapshot of every approach. Call again to restart."""
        for approach in self._approaches:
            yield approach.snapshot()

    @property
    def approaches(self) -> tuple:
        """Live approaches in registry order (for the engine and controllers)."""
        return tuple(self._approaches)

    def queues(self) -> list[int]:
        return [a.queue for a in self._approaches]

    # ── run lifecycle ────────────────────
    def reset_counters(self):
        for approach in self._approaches:
            approach.reset_counters()

    # ── container protocol ───────────────
    def __len__(self) -> int:
        return len(self._approaches)

    def __contains__(self, approach_id) -> bool:
        return any(a.id == approach_id for a in self._approaches)

    def __iter__(self):
        return self.list_approaches()

    def __repr__(self):
        return f"ApproachRegistry({[a.id for a in self._approaches]})"
