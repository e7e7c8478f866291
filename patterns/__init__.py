"""
Design pattern demos.

DEMOS maps a demo name to its main() so simulator.py --demo NAME can run it.
"""

from patterns.behaviour import iterator, observer, strategy
from patterns.creational import (
    abstract_factory,
    builder,
    factory,
    object_pool,
    prototype,
    singleton,
)
from patterns.structural import (
    adapter,
    bridge,
    composite,
    decorator,
    facade,
    flyweight,
    proxy,
)
from tasks.notification import alert_factory, legacy_notifier


DEMOS = {
    "iterator": iterator.main,
    "observer": observer.main,
    "strategy": strategy.main,
    "abstract_factory": abstract_factory.main,
    "builder": builder.main,
    "factory": factory.main,
    "object_pool": object_pool.main,
    "prototype": prototype.main,
    "singleton": singleton.main,
    "adapter": adapter.main,
    "bridge": bridge.main,
    "composite": composite.main,
    "decorator": decorator.main,
    "facade": facade.main,
    "flyweight": flyweight.main,
    "proxy": proxy.main,
    "notification_legacy": legacy_notifier.main,
    "notification_refactored": alert_factory.main,
}
