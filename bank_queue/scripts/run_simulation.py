#!/usr/bin/env python3
"""Command-line interface for simulating a day at the bank."""

import argparse
import json
import logging
import sys
from typing import Any, Callable, Dict, List, Optional

import numpy as np

from bank_queue.system import SimulationClock, SimulationConfig, load_config, run_bank_day
from bank_queue.system.config import SIMULATION_MINUTES

REPORT_WIDTH = 41


def convert_numpy_types(obj):
    """Convert numpy types to Python native types for JSON serialization."""
    if isinstance(obj, np.integer):
        return int(obj)
    elif isinstance(obj, np.floating):
        return float(obj)
    elif isinstance(obj, np.ndarray):
        return obj.tolist()
    elif isinstance(obj, dict):
        return {key: convert_numpy_types(value) for key, value in obj.items()}
    elif isinstance(obj, (list, tuple)):
        return [convert_numpy_types(item) for item in obj]
    else:
        return obj


def prompt_value(prompt: str, convert: Callable[[str], Any],
                 input_func: Callable[[str], str] = input) -> Any:
    """Ask for a value on stdin; malformed input raises ValueError."""
    try:
        raw = input_func(prompt)
    except EOFError:
        raise ValueError("no input provided") from None
    try:
        return convert(raw.strip())
    except ValueError:
        raise ValueError(f"invalid value {raw.strip()!r}") from None


def build_config(args: argparse.Namespace,
                 input_func: Callable[[str], str] = input) -> SimulationConfig:
    """Merge the config file, command-line flags and prompted values."""
    values: Dict[str, Any] = {}
    if args.config:
        values.update(load_config(args.config))

    overrides = {
        'arrival_rate': args.arrival_rate,
        'teller_count': args.teller_count,
        'simulation_minutes': args.time,
        'service_min': args.service_min,
        'service_max': args.service_max,
        'seed': args.seed,
        'drain_stamp': args.drain_stamp,
    }
    values.update({key: value for key, value in overrides.items() if value is not None})

    minutes = values.get('simulation_minutes', SIMULATION_MINUTES)
    if 'arrival_rate' not in values:
        print(f"Bank Queue Simulator ({minutes} minutes)")
        values['arrival_rate'] = prompt_value(
            "Enter average arrivals per minute (lambda, e.g. 0.5): ", float, input_func)
    if 'teller_count' not in values:
        values['teller_count'] = prompt_value(
            "Enter number of tellers (e.g. 1): ", int, input_func)

    return SimulationConfig.from_dict(values)


def format_report(clock: SimulationClock) -> str:
    """Format the end-of-day report."""
    config = clock.config
    if not clock.stats.has_data():
        return "No customers were served during the simulation."

    stats = clock.stats
    hours = config.simulation_minutes / 60
    lines = [
        "",
        " BANK QUEUE SIMULATION REPORT ".center(REPORT_WIDTH, '='),
        f"Simulation length          : {config.simulation_minutes} minutes ({hours:g} hours)",
        f"Lambda (arrivals / minute) : {config.arrival_rate:.3f}",
        f"Tellers                    : {config.teller_count}",
        f"Total customers arrived    : {clock.total_arrived}",
        f"Total customers served     : {clock.total_served}",
        f"Recorded wait samples      : {stats.count}",
        f"Drain-phase stamping       : {config.drain_stamp}",
        "-" * REPORT_WIDTH,
        f"Mean wait time             : {stats.mean():.2f} minutes",
        f"Median wait time           : {stats.median():.2f} minutes",
        f"Mode wait time (rounded)   : {stats.mode()} minutes",
        f"Std. Deviation of waits    : {stats.stddev():.2f} minutes",
        f"Longest wait time          : {stats.max():.2f} minutes",
        "=" * REPORT_WIDTH,
    ]
    return "\n".join(lines)


def save_results(clock: SimulationClock, output_path: str) -> None:
    """Save metrics, wait samples and per-minute traces to a JSON file."""
    results = clock.get_metrics_summary()
    results['wait_samples'] = clock.stats.samples
    results['arrival_history'] = clock.arrival_history
    results['queue_length_history'] = clock.queue_length_history
    with open(output_path, 'w') as f:
        json.dump(convert_numpy_types(results), f, indent=2)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description='Simulate a day of Poisson arrivals at a bank with parallel tellers')

    parser.add_argument('arrival_rate', metavar='lambda', type=float, nargs='?',
                        help='Average arrivals per minute (prompted if omitted)')
    parser.add_argument('teller_count', metavar='tellers', type=int, nargs='?',
                        help='Number of tellers, values below 1 become 1 (prompted if omitted)')

    # Simulation parameters
    parser.add_argument('-t', '--time', type=int,
                        help='Minutes the bank accepts customers (default: 480)')
    parser.add_argument('--service-min', type=int,
                        help='Shortest service time in minutes (default: 2)')
    parser.add_argument('--service-max', type=int,
                        help='Longest service time in minutes (default: 3)')
    parser.add_argument('-s', '--seed', type=int,
                        help='Random seed (default: unseeded)')
    parser.add_argument('--drain-stamp', choices=['elapsed', 'close'],
                        help="Stamp after-hours service starts with the actual minute "
                             "('elapsed', default) or the closing minute ('close')")
    parser.add_argument('--config', type=str,
                        help='JSON file with simulation parameters')

    # Output options
    parser.add_argument('-o', '--output', type=str,
                        help='Output file for results (JSON)')
    parser.add_argument('-p', '--plot', action='store_true',
                        help='Show plots')
    parser.add_argument('--plot-file', type=str,
                        help='Save plots to file')
    parser.add_argument('-q', '--quiet', action='store_true',
                        help='Suppress console output')
    parser.add_argument('-v', '--verbose', action='count', default=0,
                        help='Log progress (-vv for every teller assignment)')

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for CLI."""
    args = parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG if args.verbose > 1 else logging.INFO,
            format='%(asctime)s %(name)s %(levelname)s: %(message)s')

    try:
        config = build_config(args)
    except (ValueError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    clock = run_bank_day(config)

    if not args.quiet:
        print(format_report(clock))

    if args.output:
        save_results(clock, args.output)
        if not args.quiet:
            print(f"\nResults saved to: {args.output}")

    if args.plot or args.plot_file:
        import matplotlib.pyplot as plt
        from bank_queue.visualization import create_performance_report
        fig = create_performance_report(clock, save_path=args.plot_file)

        if args.plot_file and not args.quiet:
            print(f"Plot saved to: {args.plot_file}")

        if args.plot:
            plt.show()
        else:
            plt.close(fig)


if __name__ == '__main__':
    main()
