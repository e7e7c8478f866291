"""
Capacity Analysis Library for the Object Pool Simulator.

Called by simulator.py --compare-capacities to run one workload at several
pool capacities. This is a library module, not a standalone CLI tool.
"""

from dataclasses import dataclass
from typing import Callable, List, Sequence, Tuple

import numpy as np

from analysis.events import EventLog
from analysis.metrics import PoolMetrics


@dataclass
class CapacityComparisonResult:
    """Results for one capacity."""
    capacity: int
    num_workers: int
    runs: int
    handles_created: float  # Averaged over runs
    peak_in_use: float
    avg_utilization: float
    avg_wait: float
    wait_count: float
    elapsed_seconds: float

    def display(self) -> str:
        """Format results for display."""
        result = f"\nCapacity: {self.capacity} ({self.num_workers} workers, {self.runs} runs)\n"
        result += f"  Handles Created: {self.handles_created:.1f}\n"
        result += f"  Peak In Use: {self.peak_in_use:.1f}\n"
        result += f"  Utilization: {self.avg_utilization:.2f}%\n"
        result += f"  Waits: {self.wait_count:.1f} (avg {self.avg_wait:.3f}s)\n"
        result += f"  Elapsed: {self.elapsed_seconds:.3f}s"
        return result


def analyze_capacity(
    capacity: int,
    num_workers: int,
    hold_seconds: float,
    run_workload_func: Callable[..., Tuple[EventLog, PoolMetrics, float]],
    num_runs: int = 1
) -> CapacityComparisonResult:
    """
    Run the same workload several times at one capacity.

    Args:
        capacity: Pool capacity to test
        num_workers: Concurrent workers per run
        hold_seconds: Time each worker holds its handle
        run_workload_func: Runs one workload and returns (event_log, metrics, elapsed)
            (injected from simulator.py)
        num_runs: Number of repetitions

    Returns:
        CapacityComparisonResult averaged over the runs
    """
    if run_workload_func is None:
        raise ValueError("run_workload_func must be provided")
    if num_runs <= 0:
        raise ValueError("num_runs must be positive")

    created, peaks, utilizations, waits, wait_counts, elapsed = [], [], [], [], [], []

    for _ in range(num_runs):
        _, metrics, seconds = run_workload_func(
            capacity=capacity,
            num_workers=num_workers,
            hold_seconds=hold_seconds
        )
        created.append(metrics.handles_created)
        peaks.append(metrics.peak_in_use)
        utilizations.append(metrics.get_utilization())
        waits.append(metrics.get_avg_wait())
        wait_counts.append(metrics.wait_count)
        elapsed.append(seconds)

    return CapacityComparisonResult(
        capacity=capacity,
        num_workers=num_workers,
        runs=num_runs,
        handles_created=float(np.mean(created)),
        peak_in_use=float(np.mean(peaks)),
        avg_utilization=float(np.mean(utilizations)),
        avg_wait=float(np.mean(waits)),
        wait_count=float(np.mean(wait_counts)),
        elapsed_seconds=float(np.mean(elapsed))
    )


def compare_capacities(
    capacities: Sequence[int],
    num_workers: int,
    hold_seconds: float,
    run_workload_func: Callable[..., Tuple[EventLog, PoolMetrics, float]],
    num_runs: int = 1
) -> List[CapacityComparisonResult]:
    """
    Compare pool behaviour across capacities.

    Returns:
        One CapacityComparisonResult per capacity, in the given order
    """
    results = []
    for capacity in capacities:
        print(f"\nRunning {num_runs} workload(s) at capacity {capacity}")
        results.append(analyze_capacity(
            capacity, num_workers, hold_seconds, run_workload_func, num_runs
        ))
    return results


def format_comparison(results: List[CapacityComparisonResult]) -> str:
    """Format comparison results as a table."""
    lines = []
    lines.append("\n" + "="*80)
    lines.append("CAPACITY COMPARISON")
    lines.append("="*80)
    lines.append(
        f"{'Capacity':>8} {'Workers':>8} {'Created':>8} {'Peak':>6} "
        f"{'Util %':>8} {'Waits':>6} {'Avg Wait':>9} {'Elapsed':>8}"
    )
    lines.append("-"*80)

    for r in results:
        lines.append(
            f"{r.capacity:>8} {r.num_workers:>8} {r.handles_created:>8.1f} {r.peak_in_use:>6.1f} "
            f"{r.avg_utilization:>8.2f} {r.wait_count:>6.1f} {r.avg_wait:>9.3f} {r.elapsed_seconds:>8.3f}"
        )

    lines.append("="*80)
    return "\n".join(lines)
