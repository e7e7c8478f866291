"""
Scenario Loader for the Object Pool Simulator.

Loads and validates JSON workload files. Supports an explicit per-worker
list and a shorthand (num_workers + hold_seconds) form.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List


class ScenarioLoadError(Exception):
    """Exception raised when scenario file cannot be loaded or is invalid."""
    pass


@dataclass
class WorkerSpec:
    """
    One worker in a workload.

    Attributes:
        worker_id: Worker identifier (unique within the scenario)
        hold_seconds: How long the worker keeps its handle
        start_delay: Seconds to wait before calling acquire()
        query: Statement run on the borrowed handle
    """
    worker_id: int
    hold_seconds: float
    start_delay: float = 0.0
    query: str = "SELECT 1"

    @property
    def name(self) -> str:
        return f"worker-{self.worker_id}"


@dataclass
class WorkloadScenario:
    """A pool capacity plus the workers that share it."""
    capacity: int
    workers: List[WorkerSpec] = field(default_factory=list)
    name: str = "unnamed"
    description: str = ""

    @property
    def num_workers(self) -> int:
        return len(self.workers)


def load_scenario(file_path: str) -> WorkloadScenario:
    """
    Load scenario from JSON file.

    Args:
        file_path: Path to scenario JSON file

    Returns:
        Validated WorkloadScenario

    Raises:
        ScenarioLoadError: If file cannot be loaded or is invalid
    """
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except FileNotFoundError:
        raise ScenarioLoadError(f"Scenario file not found: {file_path}")
    except json.JSONDecodeError as e:
        raise ScenarioLoadError(f"Invalid JSON in scenario file: {e}")
    except UnicodeDecodeError as e:
        raise ScenarioLoadError(f"Scenario file is not valid UTF-8: {e}")
    except OSError as e:
        raise ScenarioLoadError(f"Cannot read scenario file {file_path}: {e}")

    return parse_scenario(data)


def parse_scenario(data: Dict[str, Any]) -> WorkloadScenario:
    """
    Build a WorkloadScenario from already-decoded JSON data.

    Raises:
        ScenarioLoadError: If the data is invalid
    """
    if not isinstance(data, dict):
        raise ScenarioLoadError("Scenario must be a JSON object")

    if 'capacity' not in data:
        raise ScenarioLoadError("Scenario missing 'capacity' field")
    capacity = data['capacity']
    if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
        raise ScenarioLoadError(f"Scenario 'capacity' must be a positive integer, got {capacity!r}")

    if 'workers' in data:
        workers = _load_workers(data['workers'])
    elif 'num_workers' in data:
        workers = _expand_shorthand(data)
    else:
        raise ScenarioLoadError("Scenario needs either 'workers' or 'num_workers'")

    if not workers:
        raise ScenarioLoadError("Scenario has no workers")

    return WorkloadScenario(
        capacity=capacity,
        workers=workers,
        name=data.get('name', 'unnamed'),
        description=data.get('description', '')
    )


def _load_workers(worker_data: List[Dict]) -> List[WorkerSpec]:
    """
    Load explicit worker definitions.

    Args:
        worker_data: List of worker dictionaries

    Returns:
        List of WorkerSpec sorted by worker_id
    """
    if not isinstance(worker_data, list):
        raise ScenarioLoadError("'workers' must be a list")

    workers = []
    seen_ids = set()

    for entry in worker_data:
        if not isinstance(entry, dict):
            raise ScenarioLoadError(f"Worker entry must be a JSON object, got {entry!r}")
        if 'worker_id' not in entry:
            raise ScenarioLoadError("Worker missing 'worker_id' field")
        worker_id = entry['worker_id']
        if isinstance(worker_id, bool) or not isinstance(worker_id, int) or worker_id < 1:
            raise ScenarioLoadError(f"worker_id must be a positive integer, got {worker_id!r}")
        if worker_id in seen_ids:
            raise ScenarioLoadError(f"Duplicate worker_id {worker_id}")
        seen_ids.add(worker_id)

        if 'hold_seconds' not in entry:
            raise ScenarioLoadError(f"Worker {worker_id} missing 'hold_seconds'")

        workers.append(WorkerSpec(
            worker_id=worker_id,
            hold_seconds=_non_negative(entry['hold_seconds'], f"worker {worker_id} hold_seconds"),
            start_delay=_non_negative(entry.get('start_delay', 0.0), f"worker {worker_id} start_delay"),
            query=entry.get('query', "SELECT 1")
        ))

    return sorted(workers, key=lambda w: w.worker_id)


def _expand_shorthand(data: Dict) -> List[WorkerSpec]:
    """Expand num_workers/hold_seconds into identical workers numbered from 1."""
    num_workers = data['num_workers']
    if isinstance(num_workers, bool) or not isinstance(num_workers, int) or num_workers <= 0:
        raise ScenarioLoadError(f"'num_workers' must be a positive integer, got {num_workers!r}")

    hold = _non_negative(data.get('hold_seconds', 0.0), "hold_seconds")
    query = data.get('query', "SELECT 1")
    return [WorkerSpec(worker_id=i, hold_seconds=hold, query=query) for i in range(1, num_workers + 1)]


def _non_negative(value: Any, what: str) -> float:
    """Validate a non-negative number of seconds."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ScenarioLoadError(f"{what} must be a number, got {value!r}")
    if value < 0:
        raise ScenarioLoadError(f"{what} cannot be negative ({value})")
    return float(value)


def get_scenario_description(file_path: str) -> str:
    """
    Get description from scenario file without full loading.

    Args:
        file_path: Path to scenario JSON file

    Returns:
        Description string, or empty string if not present
    """
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        return data.get('description', '')
    except (OSError, ValueError, AttributeError):
        return ''
