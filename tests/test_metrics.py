"""
Metrics Tests

PoolMetrics derived from a hand-built EventLog, so every number is known.
"""

import sys
from pathlib import Path

import numpy as np

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from analysis.events import EventLog, PoolEvent, PoolEventType
from analysis.metrics import PoolMetrics, format_metrics_report


def _event(event_type, worker, in_use, idle, ts, handle_id=None):
    return PoolEvent(
        event_type=event_type,
        worker=worker,
        in_use=in_use,
        idle=idle,
        timestamp=ts,
        handle_id=handle_id
    )


def _sample_log() -> EventLog:
    """Capacity 1: A creates, B waits 0.5s, A releases, B gets conn-1, B releases."""
    log = EventLog()
    log.add(_event(PoolEventType.CREATED, "A", 1, 0, 0.0, 1))
    log.add(_event(PoolEventType.WAITING, "B", 1, 0, 0.1))
    log.add(_event(PoolEventType.RELEASED, "A", 0, 1, 0.6, 1))
    log.add(_event(PoolEventType.ACQUIRED_AFTER_WAIT, "B", 1, 0, 0.6, 1))
    log.add(_event(PoolEventType.RELEASED, "B", 0, 1, 0.7, 1))
    return log


def test_metrics_from_event_log():
    """Counts, concurrency and wait statistics."""
    print("\n" + "="*60)
    print("TEST: Metrics From Event Log")
    print("="*60)

    metrics = PoolMetrics.from_event_log(_sample_log(), max_size=1)

    assert metrics.handles_created == 1
    assert metrics.acquisitions == 2
    assert metrics.reuses == 1
    assert metrics.releases == 2
    assert metrics.handle_ids == [1]
    assert metrics.worker_acquisitions == {"A": 1, "B": 1}

    assert metrics.peak_in_use == 1
    assert np.isclose(metrics.mean_in_use, 3 / 5)
    assert np.isclose(metrics.get_utilization(), 60.0)
    assert np.isclose(metrics.get_reuse_ratio(), 0.5)

    assert metrics.wait_count == 1
    assert np.isclose(metrics.get_avg_wait(), 0.5)
    assert np.isclose(metrics.get_max_wait(), 0.5)
    assert np.isclose(metrics.get_p95_wait(), 0.5)
    print("  ✓ Metrics match the hand-built log")


def test_cancelled_wait_is_not_a_completed_wait():
    log = EventLog()
    log.add(_event(PoolEventType.CREATED, "A", 1, 0, 0.0, 1))
    log.add(_event(PoolEventType.WAITING, "B", 1, 0, 0.1))
    log.add(_event(PoolEventType.CANCELLED, "B", 1, 0, 0.3))
    log.add(_event(PoolEventType.REJECTED_RELEASE, "B", 1, 0, 0.4, 9))

    metrics = PoolMetrics.from_event_log(log, max_size=1)

    assert metrics.cancelled_waits == 1
    assert metrics.rejected_releases == 1
    assert metrics.wait_count == 0
    assert metrics.get_avg_wait() == 0.0


def test_empty_log_metrics():
    metrics = PoolMetrics.from_event_log(EventLog(), max_size=3)

    assert metrics.peak_in_use == 0
    assert metrics.mean_in_use == 0.0
    assert metrics.get_utilization() == 0.0
    assert metrics.get_reuse_ratio() == 0.0
    assert metrics.get_p95_wait() == 0.0


def test_event_log_helpers():
    log = _sample_log()

    assert len(log) == 5
    assert [e.sequence for e in log.snapshot()] == [0, 1, 2, 3, 4]
    assert len(log.get_events_by_type(PoolEventType.RELEASED)) == 2
    assert [e.event_type for e in log.get_events_by_worker("B")] == [
        PoolEventType.WAITING,
        PoolEventType.ACQUIRED_AFTER_WAIT,
        PoolEventType.RELEASED,
    ]
    text = log.display()
    assert "#1 B waiting - pool exhausted" in text
    assert "#3 B acquired conn-1 after waiting" in text


def test_format_metrics_report():
    metrics = PoolMetrics.from_event_log(_sample_log(), max_size=1)

    report = format_metrics_report(metrics, verbose=True, scenario="exhaustion")
    print(report)

    assert "Scenario: exhaustion" in report
    assert "1. Peak In Use: 1/1" in report
    assert "PER-WORKER SUMMARY" in report
    assert "METRIC FORMULAS" in report

    short = format_metrics_report(metrics)
    assert "METRIC FORMULAS" not in short
