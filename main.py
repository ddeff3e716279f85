#!/usr/bin/env python3
"""
Signal-Mind: Adaptive Green-Time Allocation Simulator
══════════════════════════════════════════════════════
Simulates a signalized intersection second by second under a fixed-time
or a queue-proportional adaptive signal plan.

Usage:
    python main.py                               # compare both strategies
    python main.py --strategy adaptive           # single run
    python main.py --scenario scenarios/short_cycle.json --plot
    python main.py --strategy fixed --log-file run.csv
    python main.py --list                        # show configured approaches
"""

import argparse
import sys

from config.settings import (
    SIM_TIME, DEFAULT_SEED,
    DEFAULT_LOG_FILE, DEFAULT_CHART_FILE,
    Strategy,
)
from config.scenario import load_scenario, default_scenario
from analytics.metrics import generate_report, format_metrics
from simulation.engine import (
    SimulationContext, run_simulation, compare_strategies, strategy_path,
)
from simulation.events import BufferedLog, export_csv
from simulation.errors import ConfigError


def positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"{value!r} is not an integer")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive number of seconds, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Signal-Mind Simulation")
    parser.add_argument("--strategy", choices=["fixed", "adaptive", "compare"], default="compare",
                        help="Signal plan to simulate (default: compare both)")
    parser.add_argument("--time", type=positive_int, default=SIM_TIME, help="Simulated seconds")
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED, help="Random seed")
    parser.add_argument("--scenario", type=str, default=None, help="JSON scenario file")
    parser.add_argument("--log-file", type=str, nargs="?", const=DEFAULT_LOG_FILE, default=None,
                        help="Stream per-second events to this CSV file")
    parser.add_argument("--export-csv", type=str, default=None,
                        help="Export buffered events to CSV after the run")
    parser.add_argument("--plot", type=str, nargs="?", const=DEFAULT_CHART_FILE, default=None,
                        help="Save a queue comparison chart (compare mode)")
    parser.add_argument("--list", action="store_true", help="List approaches and exit")
    return parser


def print_approaches(registry):
    print(f"  {'ID':>3}  {'Name':<12}{'Lanes':>6}{'Arrival/s':>11}{'Service/s':>11}")
    for snap in registry.list_approaches():
        print(f"  {snap.id:>3}  {snap.name:<12}{snap.lanes:>6}"
              f"{snap.arrival_rate:>11.2f}{snap.service_rate:>11.2f}")


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    # ── Scenario ─────────────────────────────
    try:
        if args.scenario:
            registry, timing = load_scenario(args.scenario)
        else:
            registry, timing = default_scenario()
    except ConfigError as e:
        print(f"❌ {e}")
        return 2

    context = SimulationContext(registry, timing, seed=args.seed)

    if args.list:
        print_approaches(registry)
        return 0

    print("🚦 Signal-Mind is running!")
    print(f"   Approaches: {len(registry)} | Cycle: {timing.cycle_time}s "
          f"(all-red {timing.all_red}s) | Green: {timing.min_green}-{timing.max_green}s "
          f"| Horizon: {args.time}s | Seed: {args.seed}\n")

    # ── Compare ──────────────────────────────
    if args.strategy == "compare":
        comparison = compare_strategies(context, args.time, seed=args.seed,
                                        log_to_file=bool(args.log_file), log_path=args.log_file)
        print(generate_report(comparison.adaptive, comparison.fixed))
        if args.log_file:
            for strategy in (Strategy.FIXED, Strategy.ADAPTIVE):
                print(f"📝 {strategy.value.title()} events streamed to "
                      f"{strategy_path(args.log_file, strategy)}")
        if args.export_csv:
            if args.log_file:
                print("⚠️  Events were streamed to the log files; nothing buffered to export.")
            else:
                export_csv(comparison.fixed_events, strategy_path(args.export_csv, Strategy.FIXED))
                export_csv(comparison.adaptive_events,
                           strategy_path(args.export_csv, Strategy.ADAPTIVE))
        if args.plot:
            from visualization.charts import plot_queue_comparison
            plot_queue_comparison(comparison.fixed_queue, comparison.adaptive_queue,
                                  args.plot, cycle_time=timing.cycle_time)
        return 0

    # ── Single run ───────────────────────────
    strategy = Strategy(args.strategy)
    sink = None if args.log_file else BufferedLog()
    metrics = run_simulation(
        context,
        strategy,
        total_sim_time=args.time,
        log_to_file=bool(args.log_file),
        log_path=args.log_file,
        seed=args.seed,
        sink=sink,
    )
    print(format_metrics(metrics, title=f"{strategy.value.title()} run"))

    if args.export_csv:
        if sink is None:
            print("⚠️  Events were streamed to the log file; nothing buffered to export.")
        else:
            export_csv(sink.events, args.export_csv)
    return 0


if __name__ == "__main__":
    sys.exit(main())
