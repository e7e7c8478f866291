"""
Metrics for the Object Pool Simulator.

Derives pool performance metrics from a recorded EventLog.
"""

from dataclasses import dataclass, field
from typing import Dict, List

import numpy as np

from analysis.events import EventLog, PoolEventType


_ACQUIRE_TYPES = (
    PoolEventType.CREATED,
    PoolEventType.REUSED,
    PoolEventType.ACQUIRED_AFTER_WAIT,
)


@dataclass
class PoolMetrics:
    """
    Metrics for a single workload run.

    Tracks:
    1. Concurrency: peak and mean number of handles checked out
    2. Utilization %: mean in-use / max_size x 100, sampled at every event
    3. Reuse: how many acquisitions were served by an existing handle
    4. Waiting: how often and how long callers blocked on an exhausted pool
    """
    max_size: int
    handles_created: int = 0
    acquisitions: int = 0
    reuses: int = 0
    releases: int = 0
    rejected_releases: int = 0
    cancelled_waits: int = 0
    handle_ids: List[int] = field(default_factory=list)

    # Samples taken at every event, in sequence order
    in_use_samples: np.ndarray = field(default_factory=lambda: np.zeros(0, dtype=int))
    # Seconds each completed wait lasted
    wait_durations: np.ndarray = field(default_factory=lambda: np.zeros(0, dtype=float))

    # Per-worker tracking
    worker_acquisitions: Dict[str, int] = field(default_factory=dict)

    @classmethod
    def from_event_log(cls, event_log: EventLog, max_size: int) -> "PoolMetrics":
        """
        Build metrics from the events of one run.

        Args:
            event_log: Events recorded by the pool
            max_size: Capacity of the pool that produced the events

        Returns:
            PoolMetrics instance
        """
        metrics = cls(max_size=max_size)
        events = sorted(event_log.snapshot(), key=lambda e: e.sequence)

        wait_started: Dict[str, float] = {}
        durations = []
        seen_ids = set()

        for event in events:
            if event.event_type in _ACQUIRE_TYPES:
                metrics.acquisitions += 1
                metrics.worker_acquisitions[event.worker] = (
                    metrics.worker_acquisitions.get(event.worker, 0) + 1
                )
                seen_ids.add(event.handle_id)

            if event.event_type == PoolEventType.CREATED:
                metrics.handles_created += 1
            elif event.event_type == PoolEventType.REUSED:
                metrics.reuses += 1
            elif event.event_type == PoolEventType.WAITING:
                wait_started[event.worker] = event.timestamp
            elif event.event_type == PoolEventType.ACQUIRED_AFTER_WAIT:
                metrics.reuses += 1
                started = wait_started.pop(event.worker, None)
                if started is not None:
                    durations.append(event.timestamp - started)
            elif event.event_type == PoolEventType.CANCELLED:
                metrics.cancelled_waits += 1
                wait_started.pop(event.worker, None)
            elif event.event_type == PoolEventType.RELEASED:
                metrics.releases += 1
            elif event.event_type == PoolEventType.REJECTED_RELEASE:
                metrics.rejected_releases += 1

        metrics.handle_ids = sorted(seen_ids)
        metrics.in_use_samples = np.array([e.in_use for e in events], dtype=int)
        metrics.wait_durations = np.array(durations, dtype=float)
        return metrics

    @property
    def peak_in_use(self) -> int:
        """Largest number of handles checked out at once."""
        if self.in_use_samples.size == 0:
            return 0
        return int(np.max(self.in_use_samples))

    @property
    def mean_in_use(self) -> float:
        """Average number of handles checked out across events."""
        if self.in_use_samples.size == 0:
            return 0.0
        return float(np.mean(self.in_use_samples))

    @property
    def wait_count(self) -> int:
        """Number of waits that ended with a handle."""
        return int(self.wait_durations.size)

    def get_utilization(self) -> float:
        """Average utilization percentage (mean in-use / capacity)."""
        return self.mean_in_use / self.max_size * 100

    def get_reuse_ratio(self) -> float:
        """Fraction of acquisitions served by an already-created handle."""
        if self.acquisitions == 0:
            return 0.0
        return self.reuses / self.acquisitions

    def get_avg_wait(self) -> float:
        """Mean seconds spent blocked per completed wait."""
        if self.wait_durations.size == 0:
            return 0.0
        return float(np.mean(self.wait_durations))

    def get_max_wait(self) -> float:
        """Longest completed wait in seconds."""
        if self.wait_durations.size == 0:
            return 0.0
        return float(np.max(self.wait_durations))

    def get_p95_wait(self) -> float:
        """95th percentile of completed waits in seconds."""
        if self.wait_durations.size == 0:
            return 0.0
        return float(np.percentile(self.wait_durations, 95))


def format_metrics_report(
    metrics: PoolMetrics,
    verbose: bool = False,
    scenario: str = None
) -> str:
    """
    Format metrics for display at end of a run.

    Args:
        metrics: PoolMetrics instance with collected data
        verbose: If True, include per-worker breakdown and formulas
        scenario: Scenario name or path

    Returns:
        Formatted metrics report string
    """
    lines = []
    lines.append("\n" + "="*60)
    lines.append("POOL METRICS")
    lines.append("="*60)

    if scenario:
        lines.append(f"Scenario: {scenario}")
        lines.append("")

    lines.append(f"Capacity: {metrics.max_size}")
    lines.append(f"Handles Created: {metrics.handles_created} {[f'conn-{i}' for i in metrics.handle_ids]}")
    lines.append(f"Acquisitions: {metrics.acquisitions}")
    lines.append(f"Releases: {metrics.releases}")
    lines.append("")

    lines.append("KEY PERFORMANCE METRICS:")
    lines.append("-" * 60)
    lines.append(f"1. Peak In Use: {metrics.peak_in_use}/{metrics.max_size}")
    lines.append(f"2. Average Utilization: {metrics.get_utilization():.2f}%")
    lines.append(f"3. Reuse Ratio: {metrics.get_reuse_ratio():.2%}")
    lines.append(
        f"4. Waits: {metrics.wait_count} "
        f"(avg {metrics.get_avg_wait():.3f}s, p95 {metrics.get_p95_wait():.3f}s, "
        f"max {metrics.get_max_wait():.3f}s)"
    )

    if metrics.cancelled_waits or metrics.rejected_releases:
        lines.append("")
        lines.append(f"Cancelled Waits: {metrics.cancelled_waits}")
        lines.append(f"Rejected Releases: {metrics.rejected_releases}")

    if verbose:
        if metrics.worker_acquisitions:
            lines.append("")
            lines.append("PER-WORKER SUMMARY:")
            lines.append("-" * 60)
            for worker in sorted(metrics.worker_acquisitions.keys()):
                lines.append(f"  {worker}: {metrics.worker_acquisitions[worker]} acquisitions")

        lines.append("")
        lines.append("METRIC FORMULAS:")
        lines.append("-" * 60)
        lines.append("1. Peak In Use: max over events of (created - idle)")
        lines.append("2. Utilization: mean over events of (created - idle) / capacity x 100")
        lines.append("3. Reuse Ratio: (reused + acquired after wait) / acquisitions")
        lines.append("4. Wait: time from WAITING to ACQUIRED_AFTER_WAIT per worker")

    lines.append("="*60)
    return "\n".join(lines)
