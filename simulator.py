#!/usr/bin/env python3
"""
Object Pool Simulator
Main entry point for the pool workload driver and the pattern demos.

Runs concurrent workers against a BoundedResourcePool and reports how
handles were created, reused and waited for.
"""

import argparse
import sys
import threading
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

from models.pool import BoundedResourcePool
from analysis.events import EventLog
from analysis.metrics import PoolMetrics, format_metrics_report
from analysis.analyzer import compare_capacities, format_comparison
from utils.logger import DemoLogger
from utils.scenario_loader import (
    WorkerSpec,
    WorkloadScenario,
    ScenarioLoadError,
    get_scenario_description,
    load_scenario,
    parse_scenario,
)
from patterns import DEMOS


SCENARIOS_DIR = Path(__file__).parent / "scenarios"


@dataclass
class WorkloadResult:
    """Outcome of one workload run."""
    event_log: EventLog
    metrics: PoolMetrics
    elapsed_seconds: float
    completed_workers: List[str] = field(default_factory=list)
    errors: List[Tuple[str, Exception]] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return not self.errors


def run_workload(
    scenario: WorkloadScenario,
    verbose: bool = False,
    logger: Optional[DemoLogger] = None
) -> WorkloadResult:
    """
    Run every worker of the scenario concurrently against one pool.

    Each worker:
    1. Sleeps for its start_delay
    2. Acquires a handle (blocking if the pool is exhausted)
    3. Runs its query and holds the handle for hold_seconds
    4. Releases the handle (always, via finally)

    Args:
        scenario: Workload to run
        verbose: Enable verbose logging
        logger: Logger to use; a console logger is created when omitted

    Returns:
        WorkloadResult with the event log, metrics and any worker errors
    """
    logger = logger or DemoLogger(verbose=verbose)
    event_log = EventLog()
    pool = BoundedResourcePool(scenario.capacity, event_log=event_log, logger=logger)

    completed: List[str] = []
    errors: List[Tuple[str, Exception]] = []
    results_lock = threading.Lock()

    def job(spec: WorkerSpec) -> None:
        try:
            if spec.start_delay:
                time.sleep(spec.start_delay)
            handle = pool.acquire()
            try:
                logger.log_worker(spec.name, f"got {handle}")
                time.sleep(spec.hold_seconds)
                logger.log_worker(spec.name, f"used {handle} -> {handle.query(spec.query)}")
            finally:
                pool.release(handle)
            with results_lock:
                completed.append(spec.name)
        except Exception as e:
            logger.log_worker(spec.name, f"failed: {e}", "error")
            with results_lock:
                errors.append((spec.name, e))

    logger.log(f"\n{'='*60}")
    logger.log(f"WORKLOAD START: {scenario.name}")
    logger.log(f"Capacity: {scenario.capacity}, Workers: {scenario.num_workers}")
    logger.log(f"{'='*60}\n")

    threads = [
        threading.Thread(target=job, args=(spec,), name=spec.name)
        for spec in scenario.workers
    ]

    started = time.monotonic()
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    elapsed = time.monotonic() - started

    # SANITY CHECK: every handle is back and capacity held
    pool.assert_handle_conservation("after workload")
    logger.log_pool_state(pool.snapshot().display())

    logger.log(f"\n{'='*60}")
    logger.log("WORKLOAD COMPLETE")
    logger.log(f"{'='*60}")

    metrics = PoolMetrics.from_event_log(event_log, scenario.capacity)
    return WorkloadResult(
        event_log=event_log,
        metrics=metrics,
        elapsed_seconds=elapsed,
        completed_workers=sorted(completed),
        errors=errors
    )


def run_capacity_workload(
    capacity: int,
    num_workers: int,
    hold_seconds: float
) -> Tuple[EventLog, PoolMetrics, float]:
    """Run a shorthand workload quietly; used by the capacity analyzer."""
    scenario = parse_scenario({
        'name': f"capacity-{capacity}",
        'capacity': capacity,
        'num_workers': num_workers,
        'hold_seconds': hold_seconds
    })
    result = run_workload(scenario, logger=_QuietLogger())
    return result.event_log, result.metrics, result.elapsed_seconds


class _QuietLogger(DemoLogger):
    """Logger that discards everything except errors."""

    def log(self, message: str, level: str = "info") -> None:
        if level == "error":
            super().log(message, level)


def _parse_capacities(value: str) -> List[int]:
    try:
        capacities = [int(part) for part in value.split(',') if part.strip()]
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid capacity list: {value!r}")
    if not capacities or any(c <= 0 for c in capacities):
        raise argparse.ArgumentTypeError("capacities must be positive integers")
    return capacities


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the simulator."""
    parser = argparse.ArgumentParser(
        description='Object Pool Simulator & design pattern demos'
    )
    parser.add_argument(
        '--scenario',
        type=str,
        help='Path to workload scenario JSON file'
    )
    parser.add_argument(
        '--capacity',
        type=int,
        default=2,
        help='Pool capacity when no scenario is given (default: 2)'
    )
    parser.add_argument(
        '--workers',
        type=int,
        default=4,
        help='Number of concurrent workers when no scenario is given (default: 4)'
    )
    parser.add_argument(
        '--hold',
        type=float,
        default=0.5,
        help='Seconds each worker holds its handle (default: 0.5)'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable verbose logging'
    )
    parser.add_argument(
        '--compare-capacities',
        type=_parse_capacities,
        metavar='N[,N...]',
        help='Run the workload at each capacity and compare'
    )
    parser.add_argument(
        '--runs',
        type=int,
        default=1,
        help='Runs per capacity in comparison mode (default: 1)'
    )
    parser.add_argument(
        '--demo',
        choices=sorted(DEMOS.keys()),
        help='Run a design pattern demo instead of a workload'
    )
    parser.add_argument(
        '--list-demos',
        action='store_true',
        help='List available pattern demos'
    )
    parser.add_argument(
        '--list-scenarios',
        action='store_true',
        help='List bundled workload scenarios with their descriptions'
    )

    args = parser.parse_args(argv)

    if args.list_demos:
        for name in sorted(DEMOS.keys()):
            print(name)
        return 0

    if args.list_scenarios:
        for path in sorted(SCENARIOS_DIR.glob('*.json')):
            print(f"{path.name}: {get_scenario_description(str(path))}")
        return 0

    if args.demo:
        DEMOS[args.demo]()
        return 0

    if args.compare_capacities:
        if args.runs <= 0:
            parser.error('--runs must be positive')
        results = compare_capacities(
            args.compare_capacities,
            num_workers=args.workers,
            hold_seconds=args.hold,
            run_workload_func=run_capacity_workload,
            num_runs=args.runs
        )
        for r in results:
            print(r.display())
        print(format_comparison(results))
        return 0

    logger = DemoLogger(verbose=args.verbose)

    if args.scenario:
        try:
            scenario = load_scenario(args.scenario)
        except ScenarioLoadError as e:
            logger.log(f"Failed to load scenario: {e}", "error")
            return 1
    else:
        try:
            scenario = parse_scenario({
                'name': 'command-line',
                'capacity': args.capacity,
                'num_workers': args.workers,
                'hold_seconds': args.hold
            })
        except ScenarioLoadError as e:
            parser.error(str(e))

    result = run_workload(scenario, verbose=args.verbose, logger=logger)
    logger.log(format_metrics_report(result.metrics, verbose=args.verbose, scenario=scenario.name))

    if args.verbose:
        logger.log("\nEvent Log:")
        logger.log(result.event_log.display())

    for worker, error in result.errors:
        logger.log(f"{worker} raised {type(error).__name__}: {error}", "error")

    logger.close()
    return 0 if result.succeeded else 1


if __name__ == '__main__':
    sys.exit(main())
