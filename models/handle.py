"""
Handle model for the Object Pool Simulator.

Represents a reusable resource handle (a simulated connection) managed by
a BoundedResourcePool.
"""

from dataclasses import dataclass
from enum import Enum


class HandleState(Enum):
    """Handle states as tracked by the owning pool."""
    UNCREATED = "UNCREATED"
    IDLE = "IDLE"
    CHECKED_OUT = "CHECKED_OUT"


@dataclass(frozen=True)
class Handle:
    """
    Represents a reusable unit of work capacity.

    Attributes:
        handle_id: Identifier assigned by the pool at creation (starts at 1)

    The handle is immutable; checked-out/idle bookkeeping lives in the pool.
    """
    handle_id: int

    def __post_init__(self):
        """Validate handle identifier."""
        if self.handle_id < 1:
            raise ValueError(f"Handle id must be >= 1, got {self.handle_id}")

    def query(self, sql: str) -> str:
        """
        Run a simulated query on this handle.

        Args:
            sql: Statement to "execute"

        Returns:
            Description of which handle served the statement
        """
        return f"{self} -> {sql}"

    def __str__(self) -> str:
        return f"conn-{self.handle_id}"
