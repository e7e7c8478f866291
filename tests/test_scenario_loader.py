"""
Scenario Loader Tests

Valid workload files, the shorthand form, and every rejection path.
"""

import json
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from utils.scenario_loader import (
    ScenarioLoadError,
    get_scenario_description,
    load_scenario,
    parse_scenario,
)


SCENARIOS_DIR = project_root / "scenarios"


def _write(tmp_path, data, name="scenario.json"):
    path = tmp_path / name
    path.write_text(json.dumps(data) if not isinstance(data, str) else data, encoding="utf-8")
    return str(path)


def _expect_error(data, fragment):
    try:
        parse_scenario(data)
        assert False, f"Expected ScenarioLoadError containing {fragment!r}"
    except ScenarioLoadError as e:
        assert fragment in str(e), str(e)


def test_load_bundled_scenarios():
    """Every bundled scenario loads."""
    print("\n" + "="*60)
    print("TEST: Bundled Scenarios")
    print("="*60)

    for path in sorted(SCENARIOS_DIR.glob("*.json")):
        scenario = load_scenario(str(path))
        print(f"  ✓ {path.name}: capacity={scenario.capacity}, workers={scenario.num_workers}")
        assert scenario.capacity >= 1
        assert scenario.num_workers >= 1


def test_explicit_workers_sorted_and_defaulted(tmp_path):
    path = _write(tmp_path, {
        "name": "explicit",
        "capacity": 2,
        "workers": [
            {"worker_id": 3, "hold_seconds": 1},
            {"worker_id": 1, "hold_seconds": 0.5, "start_delay": 0.2, "query": "SELECT now()"},
        ]
    })
    scenario = load_scenario(path)

    assert scenario.name == "explicit"
    assert [w.worker_id for w in scenario.workers] == [1, 3]
    first, second = scenario.workers
    assert first.name == "worker-1"
    assert first.start_delay == 0.2
    assert first.query == "SELECT now()"
    assert second.hold_seconds == 1.0
    assert second.start_delay == 0.0
    assert second.query == "SELECT 1"


def test_shorthand_expands_workers():
    scenario = parse_scenario({"capacity": 2, "num_workers": 4, "hold_seconds": 0.25})

    assert scenario.num_workers == 4
    assert [w.name for w in scenario.workers] == ["worker-1", "worker-2", "worker-3", "worker-4"]
    assert all(w.hold_seconds == 0.25 for w in scenario.workers)


def test_missing_file_and_bad_json(tmp_path):
    try:
        load_scenario(str(tmp_path / "missing.json"))
        assert False, "Missing file should be rejected"
    except ScenarioLoadError as e:
        assert "not found" in str(e)

    path = _write(tmp_path, "{not json", name="broken.json")
    try:
        load_scenario(path)
        assert False, "Broken JSON should be rejected"
    except ScenarioLoadError as e:
        assert "Invalid JSON" in str(e)


def test_invalid_scenarios_rejected():
    _expect_error([], "JSON object")
    _expect_error({"num_workers": 1}, "capacity")
    _expect_error({"capacity": 0, "num_workers": 1}, "positive integer")
    _expect_error({"capacity": True, "num_workers": 1}, "positive integer")
    _expect_error({"capacity": 1}, "'workers' or 'num_workers'")
    _expect_error({"capacity": 1, "num_workers": 0}, "num_workers")
    _expect_error({"capacity": 1, "workers": []}, "no workers")
    _expect_error({"capacity": 1, "workers": {"worker_id": 1}}, "must be a list")
    _expect_error({"capacity": 1, "workers": [{"hold_seconds": 1}]}, "worker_id")
    _expect_error({"capacity": 1, "workers": [{"worker_id": 1}]}, "hold_seconds")
    _expect_error(
        {"capacity": 1, "workers": [{"worker_id": 1, "hold_seconds": 1},
                                    {"worker_id": 1, "hold_seconds": 2}]},
        "Duplicate worker_id"
    )
    _expect_error({"capacity": 1, "workers": [{"worker_id": 1, "hold_seconds": -1}]}, "negative")
    _expect_error({"capacity": 1, "workers": [{"worker_id": 1, "hold_seconds": "slow"}]}, "number")


def test_malformed_worker_entries_rejected():
    """Bad worker entries surface as ScenarioLoadError, never TypeError."""
    _expect_error({"capacity": 1, "workers": [1]}, "JSON object")
    _expect_error({"capacity": 1, "workers": [["worker_id", 1]]}, "JSON object")
    _expect_error(
        {"capacity": 1, "workers": [{"worker_id": 1, "hold_seconds": 0},
                                    {"worker_id": "b", "hold_seconds": 0}]},
        "positive integer"
    )
    _expect_error({"capacity": 1, "workers": [{"worker_id": [1], "hold_seconds": 0}]}, "positive integer")
    _expect_error({"capacity": 1, "workers": [{"worker_id": True, "hold_seconds": 0}]}, "positive integer")
    _expect_error({"capacity": 1, "workers": [{"worker_id": 0, "hold_seconds": 0}]}, "positive integer")
    _expect_error({"capacity": 1, "workers": [{"worker_id": 1.5, "hold_seconds": 0}]}, "positive integer")


def test_unreadable_files_rejected(tmp_path):
    """Undecodable bytes and directories are reported as ScenarioLoadError."""
    path = tmp_path / "latin1.json"
    path.write_bytes(b'{"capacity": 1, "name": "\xff"}')
    try:
        load_scenario(str(path))
        assert False, "Non UTF-8 file should be rejected"
    except ScenarioLoadError as e:
        assert "UTF-8" in str(e)

    try:
        load_scenario(str(tmp_path))
        assert False, "A directory should be rejected"
    except ScenarioLoadError as e:
        assert "Cannot read scenario file" in str(e)


def test_get_scenario_description(tmp_path):
    assert "four workers" in get_scenario_description(str(SCENARIOS_DIR / "end_to_end.json"))
    assert get_scenario_description(str(tmp_path / "nope.json")) == ""
