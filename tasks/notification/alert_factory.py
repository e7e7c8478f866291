"""
Wiring helper: build a NotificationService from a format name and a list
of channel names.
"""

from typing import Callable, Dict, List

from tasks.notification.formatters import FormattingStrategy, JsonFormatter, TextFormatter
from tasks.notification.service import NotificationService
from tasks.notification.subscribers import (
    DiskLogSubscriber,
    EmailSubscriber,
    SmsSubscriber,
    Subscriber,
)


FORMATTERS: Dict[str, Callable[[], FormattingStrategy]] = {
    "text": TextFormatter,
    "json": JsonFormatter,
}

CHANNELS: Dict[str, Callable[[List[str]], Subscriber]] = {
    "email": EmailSubscriber,
    "sms": SmsSubscriber,
    "log": DiskLogSubscriber,
}


def create_service(format_type: str, channels: List[str], history: List[str]) -> NotificationService:
    """
    Build a configured service.

    Args:
        format_type: "text" or "json"
        channels: Any of "email", "sms", "log" (attached in this fixed order)
        history: Shared list every subscriber appends to

    Raises:
        ValueError: On an unknown format or channel
    """
    if format_type not in FORMATTERS:
        raise ValueError(f"Unknown format: {format_type}")
    unknown = [c for c in channels if c not in CHANNELS]
    if unknown:
        raise ValueError(f"Unknown channel(s): {', '.join(unknown)}")

    service = NotificationService(FORMATTERS[format_type]())
    for name, subscriber_cls in CHANNELS.items():
        if name in channels:
            service.attach(subscriber_cls(history))
    return service


def main():
    print("--- Refactored notifier ---")
    history: List[str] = []

    service = create_service("text", ["email", "log"], history)
    print(service.notify("Disk space low", "warning"))

    service = create_service("json", ["sms", "email"], history)
    print(service.notify("Database Crash", "critical"))

    service = create_service("text", ["sms"], history)
    print(service.notify("System stable", "info"))


if __name__ == '__main__':
    main()
