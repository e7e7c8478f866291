"""
Factory pattern demo.

A registry-style DataSourceFactory maps a type name to a creator callable.
New types can be registered at runtime without touching the factory.
"""

import threading
from typing import Callable, Dict, Iterator, Optional, Protocol


Config = Dict[str, str]


class DataSource(Protocol):
    def read(self) -> Optional[str]:
        """Next record, or None at end of data."""
        ...


class FileDataSource:
    LINES = ("file-1", "file-2", "file-3")

    def __init__(self, cfg: Config):
        self.cfg = cfg
        self._i = 0

    def read(self) -> Optional[str]:
        if self._i >= len(self.LINES):
            return None
        line = self.LINES[self._i]
        self._i += 1
        return line


class KafkaDataSource:
    def __init__(self, cfg: Config):
        self.cfg = cfg
        self._i = 0

    def read(self) -> Optional[str]:
        self._i += 1
        return f"kafka-{self._i}" if self._i <= 3 else None


class JdbcDataSource:
    def __init__(self, cfg: Config):
        self.cfg = cfg
        self._i = 0

    def read(self) -> Optional[str]:
        self._i += 1
        return f"row-{self._i}" if self._i <= 2 else None


class UppercaseFileDataSource:
    """Wraps a FileDataSource and upper-cases each record."""

    def __init__(self, cfg: Config):
        self._base = FileDataSource(cfg)

    def read(self) -> Optional[str]:
        value = self._base.read()
        return value.upper() if value is not None else None


class DataSourceFactory:
    """Case-insensitive registry of data source creators."""

    def __init__(self):
        self._registry: Dict[str, Callable[[Config], DataSource]] = {}
        self._lock = threading.Lock()
        self.register("file", FileDataSource)
        self.register("kafka", KafkaDataSource)
        self.register("jdbc", JdbcDataSource)

    def register(self, source_type: str, creator: Callable[[Config], DataSource]) -> None:
        """
        Register or replace a creator.

        Args:
            source_type: Type name, matched case-insensitively
            creator: Callable taking the config dict and returning a DataSource
        """
        with self._lock:
            self._registry[source_type.lower()] = creator

    def create(self, source_type: str, cfg: Optional[Config] = None) -> DataSource:
        """
        Create a data source.

        Raises:
            ValueError: If no creator is registered for source_type
        """
        with self._lock:
            creator = self._registry.get(source_type.lower())
        if creator is None:
            raise ValueError(f"Unknown type: {source_type}")
        return creator(cfg or {})

    def types(self):
        """Registered type names, sorted."""
        with self._lock:

            return sorted(self._registry)


def drain(source: DataSource) -> Iterator[str]:
    """Yield records until the source returns None."""
    record = source.read()
    while record is not None:
        yield record
        record = source.read()


def main():
    factory = DataSourceFactory()

    print("File source:")
    for record in drain(factory.create("file", {"path": "/tmp/x"})):
        print(f"  {record}")

    print("Kafka source:")
    for record in drain(factory.create("kafka", {"topic": "t"})):
        print(f"  {record}")

    factory.register("uppercase-file", UppercaseFileDataSource)
    print("Uppercase-file source:")
    for record in drain(factory.create("uppercase-file")):
        print(f"  {record}")


if __name__ == '__main__':
    main()
