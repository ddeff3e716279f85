"""
Signal-Mind – Cycle Scheduler / Simulation Engine
Second-by-second loop: arrivals → green slot → service → wait accrual → log.
"""

import os
from dataclasses import dataclass, field

import numpy as np

from config.settings import DEFAULT_SEED, SIM_TIME, Strategy
from analytics.metrics import Metrics, compute_metrics
from controllers import make_controller
from simulation.approach import ApproachRegistry
from simulation.arrivals import ArrivalGenerator
from simulation.events import Event, NoLog, BufferedLog, StreamedLog
from simulation.traffic_light import TimingPlan, TrafficLightController, Allocation


class SimulationContext:
    """
    Everything one run needs, owned by the caller: the approaches, the
    timing plan and the random source. Independent contexts never share
    state, so several can be simulated side by side.
    """

    def __init__(self, registry: ApproachRegistry | None = None,
                 timing: TimingPlan | None = None,
                 arrivals: ArrivalGenerator | None = None,
                 seed: int | None = DEFAULT_SEED):
        self.registry = registry if registry is not None else ApproachRegistry()
        self.timing = timing or TimingPlan()
        self.arrivals = arrivals or ArrivalGenerator(seed)

    def prepare_run(self, seed: int | None = None):
        """Zero every counter (and optionally re-seed) before a run."""
        self.registry.reset_counters()
        if seed is not None:
            self.arrivals.seed(seed)


class SimulationEngine:
    """
    Drives one open-loop run of a fixed number of seconds.

    The controller is asked for an allocation at t = 0 and, when it
    recomputes per cycle, again at every cycle boundary. The boundary
    second's arrivals are counted before the allocation is made.
    """

    def __init__(self, context: SimulationContext, controller: TrafficLightController,
                 sink=None):
        self.context = context
        self.controller = controller
        self.sink = sink if sink is not None else NoLog()
        self.allocation: Allocation | None = None
        self.queue_history = np.zeros(0, dtype=np.int64)
        self.degenerate_cycles = 0

    def run(self, total_sim_time: int) -> Metrics:
        registry = self.context.registry
        approaches = registry.approaches
        if not approaches:
            print("⚠️  No approaches configured. Nothing to simulate.")
            return Metrics.zero()

        timing = self.context.timing
        arrivals = self.context.arrivals
        steps = max(0, total_sim_time)
        self.queue_history = np.zeros(steps, dtype=np.int64)
        self.degenerate_cycles = 0

        with self.sink:
            for t in range(steps):
                sec = t % timing.cycle_time

                # ── Arrivals ──
                for approach in approaches:
                    arrived = arrivals.sample(approach.arrival_rate)
                    approach.queue += arrived
                    approach.total_arrived += arrived
                    approach.cum_queue_length += approach.queue

                # ── Allocation (cycle boundary) ──
                if sec == 0 and (t == 0 or self.controller.RECOMPUTE_EACH_CYCLE):
                    self.allocation = self.controller.allocate_for(approaches)
                    if self.allocation.degenerate:
                        if self.degenerate_cycles == 0:
                            print("⚠️  Cycle too short for min_green on every approach; "
                                  f"using equal split {self.allocation.greens}.")
                        self.degenerate_cycles += 1

                # ── Green slot ──
                index = self.allocation.slot_at(sec)
                active = approaches[index] if index is not None else None

                # ── Service ──
                passed = 0
                if active is not None:
                    passed = min(active.capacity, active.queue)
                    active.queue -= passed
                    active.total_served += passed

                # ── Wait accrual ──
                total_queue = 0
                for approach in approaches:
                    approach.cumulative_wait += approach.queue
                    total_queue += approach.queue
                self.queue_history[t] = total_queue

                # ── Log ──
                self.sink.emit(Event(t, active.id if active else None, passed))

        return compute_metrics(approaches, total_sim_time)


def make_sink(log_to_file: bool, log_path: str | None = None, buffer: bool = True):
    """StreamedLog when logging to file, else BufferedLog (or NoLog)."""
    if log_to_file and log_path:
        return StreamedLog(log_path)
    return BufferedLog() if buffer else NoLog()


def run_simulation(context: SimulationContext, strategy=Strategy.ADAPTIVE,
                   total_sim_time: int = SIM_TIME, log_to_file: bool = False,
                   log_path: str | None = None, seed: int | None = None,
                   sink=None) -> Metrics:
    """
    Reset the context, run *strategy* for *total_sim_time* seconds, and
    return the resulting Metrics.
    """
    context.prepare_run(seed)
    controller = make_controller(strategy, context.timing)
    engine = SimulationEngine(context, controller,
                              sink if sink is not None else make_sink(log_to_file, log_path))
    return engine.run(total_sim_time)


@dataclass
class Comparison:
    adaptive: Metrics
    fixed: Metrics
    adaptive_queue: np.ndarray = field(default_factory=lambda: np.zeros(0))
    fixed_queue: np.ndarray = field(default_factory=lambda: np.zeros(0))
    adaptive_events: list = field(default_factory=list)
    fixed_events: list = field(default_factory=list)


def strategy_path(path: str, strategy) -> str:
    """'run.csv' → 'run_fixed.csv' / 'run_adaptive.csv'."""
    root, ext = os.path.splitext(path)
    return f"{root}_{Strategy(strategy).value}{ext or '.csv'}"


def compare_strategies(context: SimulationContext, total_sim_time: int = SIM_TIME,
                       seed: int | None = DEFAULT_SEED, log_to_file: bool = False,
                       log_path: str | None = None) -> Comparison:
    """
    Run Fixed then Adaptive from identical starting state and seed.

    With log_to_file, each strategy streams to its own file derived from
    *log_path* (see strategy_path) and no events are buffered.
    """
    results = {}
    for strategy in (Strategy.FIXED, Strategy.ADAPTIVE):
        context.prepare_run(seed)
        if log_to_file and log_path:
            sink = StreamedLog(strategy_path(log_path, strategy))
        else:
            sink = BufferedLog()
        engine = SimulationEngine(context, make_controller(strategy, context.timing), sink)
        metrics = engine.run(total_sim_time)
        results[strategy] = (metrics, engine.queue_history, sink.events)

    fixed_m, fixed_q, fixed_e = results[Strategy.FIXED]
    adaptive_m, adaptive_q, adaptive_e = results[Strategy.ADAPTIVE]
    return Comparison(
        adaptive=adaptive_m,
        fixed=fixed_m,
        adaptive_queue=adaptive_q,
        fixed_queue=fixed_q,
        adaptive_events=adaptive_e,
        fixed_events=fixed_e,
    )
