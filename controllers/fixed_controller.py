"""
Signal-Mind – Fixed-Time Controller (the baseline)
Splits the cycle evenly with no awareness of traffic.
"""

from simulation.traffic_light import TrafficLightController, Allocation


class FixedTimeController(TrafficLightController):
    """
    Every approach gets the same bounded share of the green time:

        base = (cycle_time - all_red) // n, clamped to [min_green, max_green]

    Any difference between n * base and the available green time is then
    handed out (or taken back) one second at a time, index 0 first, so
    the greens always add up to exactly cycle_time - all_red.
    """

    NAME = "Fixed"
    RECOMPUTE_EACH_CYCLE = False

    def allocate(self, queues: list[int]) -> Allocation:
        n = len(queues)
        if n == 0:
            return Allocation([])

        available = self.timing.available
        base = self.timing.clamp(available // n)
        greens = self._round_robin([base] * n, available)
        return Allocation(greens, degenerate=not self.timing.is_feasible(n))
