"""
Singleton pattern demo.

LazyInstance is an explicit initialize-once guard: the factory runs on
first access only, behind a double-checked lock, so concurrent first
callers still share one instance. The instance is passed to the code that
needs it instead of being fetched from a hidden global.
"""

import threading
from typing import Callable, Generic, List, Optional, TypeVar

T = TypeVar("T")


class LazyInstance(Generic[T]):
    """Thread-safe lazily created single instance."""

    def __init__(self, factory: Callable[[], T]):
        self._factory = factory
        self._instance: Optional[T] = None
        self._lock = threading.Lock()
        self.creations = 0

    @property
    def initialized(self) -> bool:
        """True once the factory has run."""
        return self._instance is not None

    def get(self) -> T:
        """
        Shared instance, created on the first call.

        Returns:
            The same object for every caller and thread
        """
        if self._instance is None:

            with self._lock:
                if self._instance is None:
                    self._instance = self._factory()
                    self.creations += 1
        return self._instance


class AppConfig:
    """Example shared object (what the singleton guards)."""

    def __init__(self):
        self.settings = {"region": "local", "retries": "3"}


class ReportService:
    """Receives the shared AppConfig explicitly."""

    def __init__(self, config: AppConfig):
        self.config = config

    def describe(self) -> str:
        return f"report for region {self.config.settings['region']}"


def main():
    print("\nMulti-thread test:")
    config_holder: LazyInstance[AppConfig] = LazyInstance(AppConfig)
    seen: List[int] = []
    seen_lock = threading.Lock()

    def task():
        inst = config_holder.get()
        with seen_lock:
            seen.append(id(inst))
        print(f"{threading.current_thread().name} -> instance id: {id(inst)}")

    threads = [threading.Thread(target=task, name=f"T{i}") for i in range(1, 4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    print("If all ids are the same -> singleton works correctly.")
    print(f"Distinct instances: {len(set(seen))}, factory calls: {config_holder.creations}")

    service = ReportService(config_holder.get())
    print(service.describe())


if __name__ == '__main__':
    main()
