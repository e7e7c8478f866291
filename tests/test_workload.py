"""
Workload Tests

Runs the end-to-end and exhaustion scenarios through simulator.run_workload
and checks the CLI entry point and the capacity analyzer.
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from simulator import main, run_capacity_workload, run_workload
from analysis.analyzer import compare_capacities, format_comparison
from analysis.events import PoolEventType
from analysis.metrics import PoolMetrics
from utils.logger import DemoLogger
from utils.scenario_loader import load_scenario, parse_scenario


SCENARIOS_DIR = project_root / "scenarios"


def test_end_to_end_scenario():
    """
    Capacity 2, four concurrent workers.

    Expected:
    - exactly two handles constructed (conn-1, conn-2)
    - all four workers complete without exceptions
    - never more than two handles held at once
    """
    print("\n" + "="*60)
    print("WORKLOAD TEST: End-to-End Scenario")
    print("="*60)

    scenario = load_scenario(str(SCENARIOS_DIR / "end_to_end.json"))
    result = run_workload(scenario, logger=DemoLogger())

    created = result.event_log.get_events_by_type(PoolEventType.CREATED)
    print(f"  Created: {[e.handle_id for e in created]}")
    print(f"  Completed: {result.completed_workers}")
    print(f"  Peak in use: {result.metrics.peak_in_use}")

    assert sorted(e.handle_id for e in created) == [1, 2]
    assert result.metrics.handles_created == 2
    assert result.metrics.handle_ids == [1, 2]
    assert result.succeeded, result.errors
    assert result.completed_workers == ["worker-1", "worker-2", "worker-3", "worker-4"]
    assert result.metrics.peak_in_use <= 2
    assert result.metrics.acquisitions == 4
    assert result.metrics.releases == 4
    assert all(e.in_use <= 2 for e in result.event_log.snapshot())
    print("  ✓ Two handles shared by four workers")


def test_exhaustion_scenario():
    """
    Capacity 1: worker-1 holds, worker-2 blocks, then reuses conn-1.
    """
    print("\n" + "="*60)
    print("WORKLOAD TEST: Exhaustion Scenario")
    print("="*60)

    scenario = load_scenario(str(SCENARIOS_DIR / "exhaustion.json"))
    result = run_workload(scenario, logger=DemoLogger())

    waits = result.event_log.get_events_by_worker("worker-2")
    types = [e.event_type for e in waits]
    print(f"  worker-2 events: {[t.value for t in types]}")

    assert PoolEventType.WAITING in types, "worker-2 should have blocked"
    after_wait = [e for e in waits if e.event_type == PoolEventType.ACQUIRED_AFTER_WAIT]
    assert len(after_wait) == 1
    assert after_wait[0].handle_id == 1, "worker-2 should reuse conn-1, not a new handle"
    assert result.metrics.handles_created == 1
    assert result.metrics.wait_count == 1
    assert result.metrics.get_max_wait() > 0.2
    assert result.succeeded
    print("  ✓ worker-2 blocked, then received conn-1")


def test_burst_scenario_holds_capacity():
    """Eight staggered workers never push more than three handles out."""
    scenario = load_scenario(str(SCENARIOS_DIR / "burst.json"))
    result = run_workload(scenario, logger=DemoLogger())

    assert result.succeeded
    assert len(result.completed_workers) == 8
    assert result.metrics.peak_in_use <= 3
    assert result.metrics.handles_created <= 3
    assert result.metrics.get_reuse_ratio() > 0


def test_run_capacity_workload_returns_metrics():
    """The quiet runner used by the analyzer returns (log, metrics, elapsed)."""
    event_log, metrics, elapsed = run_capacity_workload(capacity=1, num_workers=3, hold_seconds=0.01)

    assert isinstance(metrics, PoolMetrics)
    assert metrics.handles_created == 1
    assert metrics.acquisitions == 3
    assert len(event_log) > 0
    assert elapsed >= 0.03


def test_compare_capacities():
    """More capacity means more handles and fewer waits for the same workload."""
    results = compare_capacities(
        [1, 4],
        num_workers=4,
        hold_seconds=0.05,
        run_workload_func=run_capacity_workload
    )

    assert [r.capacity for r in results] == [1, 4]
    assert results[0].handles_created == 1
    assert results[0].wait_count >= 1
    assert results[1].handles_created <= 4
    assert results[1].peak_in_use <= 4

    table = format_comparison(results)
    print(table)
    assert "CAPACITY COMPARISON" in table


def test_compare_capacities_requires_runner():
    try:
        compare_capacities([1], num_workers=1, hold_seconds=0, run_workload_func=None)
        assert False, "Missing runner should be rejected"
    except ValueError:
        pass


def test_worker_errors_are_collected():
    """A failing worker is reported and does not leak its handle."""
    scenario = parse_scenario({'capacity': 1, 'num_workers': 2, 'hold_seconds': 0.0})

    class BrokenLogger(DemoLogger):
        def log_worker(self, worker, message, level="info"):
            if worker == "worker-1" and message.startswith("got"):
                raise RuntimeError("log sink down")
            super().log_worker(worker, message, level)

    result = run_workload(scenario, logger=BrokenLogger())

    assert not result.succeeded
    assert [name for name, _ in result.errors] == ["worker-1"]
    assert result.completed_workers == ["worker-2"]
    assert result.metrics.releases == 2


def test_cli_list_and_run_demo(capsys):
    assert main(["--list-demos"]) == 0
    listed = capsys.readouterr().out.split()
    assert "object_pool" in listed
    assert "notification_refactored" in listed

    assert main(["--demo", "strategy"]) == 0
    out = capsys.readouterr().out
    assert "80.0" in out and "85" in out


def test_cli_runs_workload_and_reports_metrics(capsys):
    assert main(["--capacity", "2", "--workers", "3", "--hold", "0.01"]) == 0
    out = capsys.readouterr().out
    assert "POOL METRICS" in out
    assert "Peak In Use" in out


def test_cli_missing_scenario_returns_error(capsys):
    assert main(["--scenario", str(SCENARIOS_DIR / "does_not_exist.json")]) == 1
    assert "Failed to load scenario" in capsys.readouterr().out


def test_cli_malformed_scenario_returns_error(tmp_path, capsys):
    """Malformed workers and undecodable files are logged, not raised."""
    bad_workers = tmp_path / "bad_workers.json"
    bad_workers.write_text('{"capacity": 1, "workers": [1]}', encoding="utf-8")
    assert main(["--scenario", str(bad_workers)]) == 1
    assert "Failed to load scenario" in capsys.readouterr().out

    bad_bytes = tmp_path / "bad_bytes.json"
    bad_bytes.write_bytes(b'{"capacity": 1, "name": "\xff"}')
    assert main(["--scenario", str(bad_bytes)]) == 1
    assert "Failed to load scenario" in capsys.readouterr().out


def test_cli_lists_scenarios_with_descriptions(capsys):
    assert main(["--list-scenarios"]) == 0
    out = capsys.readouterr().out

    assert "end_to_end.json: Capacity 2, four workers" in out
    assert "exhaustion.json:" in out
    assert "burst.json:" in out
