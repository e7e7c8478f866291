"""
Formatting strategies for the notification service.
"""

import json
from datetime import datetime
from typing import Callable, Optional, Protocol


class FormattingStrategy(Protocol):
    def format(self, message: str, severity: str) -> str:
        """
        Render an alert as the text every channel sends.

        Args:
            message: Alert text
            severity: Alert level

        Returns:
            Formatted message
        """
        ...


def _now() -> str:
    return datetime.now().isoformat()


class TextFormatter:
    """Plain text: [timestamp] SEVERITY: message"""

    def __init__(self, clock: Optional[Callable[[], str]] = None):
        self.clock = clock or _now

    def format(self, message: str, severity: str) -> str:
        """Severity is upper-cased; the clock supplies the timestamp."""
        return f"[{self.clock()}] {severity.upper()}: {message}"


class JsonFormatter:
    """JSON object with timestamp, level and content keys."""

    def __init__(self, clock: Optional[Callable[[], str]] = None):
        self.clock = clock or _now

    def format(self, message: str, severity: str) -> str:
        """Serialize with json.dumps so quotes in the message stay valid JSON."""
        return json.dumps({

            "timestamp": self.clock(),
            "level": severity,
            "content": message,
        })
