"""
Proxy pattern demo.

CachedDataFetcher stands in for a slow RealDataFetcher and caches its
results. Concurrent first requests for the same key trigger one real fetch.
"""

import threading
import time
from typing import Dict, Protocol


class DataFetcher(Protocol):
    def fetch(self, key: str) -> str:
        """Value stored under key."""
        ...


class RealDataFetcher:
    """Real subject: expensive."""

    def __init__(self, delay_seconds: float = 1.0):
        self.delay_seconds = delay_seconds
        self.calls = 0
        self._lock = threading.Lock()

    def fetch(self, key: str) -> str:
        with self._lock:
            self.calls += 1
        time.sleep(self.delay_seconds)
        return f"VALUE_FOR_{key}@{int(time.time() * 1000)}"


class CachedDataFetcher:
    """Caching proxy with one lock per key."""

    def __init__(self, real_subject: DataFetcher):
        self.real_subject = real_subject
        self._cache: Dict[str, str] = {}
        self._key_locks: Dict[str, threading.Lock] = {}
        self._lock = threading.Lock()

    def fetch(self, key: str) -> str:
        """
        Cached value for key, fetched from the real subject on first use.

        Concurrent first requests for one key wait on that key's lock, so
        the real subject is called once.
        """
        # Fast path
        cached = self._cache.get(key)
        if cached is not None:
            return cached

        with self._lock:
            key_lock = self._key_locks.setdefault(key, threading.Lock())

        with key_lock:
            cached = self._cache.get(key)
            if cached is None:
                cached = self.real_subject.fetch(key)
                self._cache[key] = cached
            return cached

    def invalidate(self, key: str) -> None:
        """Drop key so the next fetch goes to the real subject."""
        with self._lock:

            self._cache.pop(key, None)


def main():
    proxy = CachedDataFetcher(RealDataFetcher())

    t0 = time.perf_counter()
    print(f"Fetch A: {proxy.fetch('A')}")
    print(f"Took {(time.perf_counter() - t0) * 1000:.1f} ms")

    t0 = time.perf_counter()
    print(f"Fetch A again: {proxy.fetch('A')}")
    print(f"Took {(time.perf_counter() - t0) * 1000:.1f} ms")


if __name__ == '__main__':
    main()
