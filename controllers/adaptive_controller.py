"""
Signal-Mind – Adaptive Controller (queue-proportional)
Re-splits the green time every cycle in proportion to queue lengths.
"""

import math

from simulation.traffic_light import TrafficLightController, Allocation


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


class AdaptiveController(TrafficLightController):
    """
    Allocates green seconds in proportion to each approach's queue.

    Logic:
    - Empty intersection → everyone gets min_green
    - Cycle too short for n * min_green → equal floor split, no clamping
    - Otherwise: proportional share, rounded and clamped, then corrected
      so the greens sum to exactly cycle_time - all_red
    - Leftover seconds go to the longest queue still under max_green;
      once every approach is at max_green the rest is spread round-robin
      past the cap so no green time is lost
    """

    NAME = "Adaptive"
    RECOMPUTE_EACH_CYCLE = True

    def allocate(self, queues: list[int]) -> Allocation:
        n = len(queues)
        if n == 0:
            return Allocation([])

        timing = self.timing
        total_queue = sum(queues)
        if total_queue == 0:
            return Allocation([timing.min_green] * n)

        available = timing.available
        if not timing.is_feasible(n):
            return Allocation([available // n] * n, degenerate=True)

        greens = [
            timing.clamp(_round_half_up(q / total_queue * available))
            for q in queues
        ]

        total = sum(greens)
        if total > available:
            greens = [timing.clamp(g * available // total) for g in greens]
            greens = self._round_robin(greens, available,
                                       lower=timing.min_green, upper=timing.max_green)
        elif total < available:
            greens = self._distribute_leftover(greens, queues, available - total)

        return Allocation(greens)

    def _distribute_leftover(self, greens: list[int], queues: list[int], leftover: int) -> list[int]:
        max_green = self.timing.max_green
        while leftover > 0:
            candidates = [i for i, g in enumerate(greens) if g < max_green]
            if not candidates:
                break
            # Longest queue wins, lowest index on ties
            best = max(candidates, key=lambda i: (queues[i], -i))
            greens[best] += 1
            leftover -= 1

        # Everyone is at max_green: keep the seconds rather than drop them
        index = 0
        while leftover > 0:
            greens[index % len(greens)] += 1
            index += 1
            leftover -= 1
        return greens
