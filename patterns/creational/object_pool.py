"""
Object Pool pattern demo.

Four workers share a BoundedResourcePool capped at two connections:
two get fresh connections, the other two block until one is released and
then reuse it.
"""

from analysis.events import EventLog, PoolEventType
from utils.logger import DemoLogger
from utils.scenario_loader import parse_scenario


def main(hold_seconds: float = 2.0) -> EventLog:
    # Imported here: simulator imports the demo registry
    from simulator import run_workload

    scenario = parse_scenario({
        'name': 'object-pool-demo',
        'capacity': 2,
        'num_workers': 4,
        'hold_seconds': hold_seconds
    })
    result = run_workload(scenario, logger=DemoLogger())

    created = result.event_log.get_events_by_type(PoolEventType.CREATED)
    print(f"\nConnections created: {[f'conn-{e.handle_id}' for e in created]}")
    print(f"Peak in use: {result.metrics.peak_in_use}/{scenario.capacity}")
    return result.event_log


if __name__ == '__main__':
    main()
