"""
NotificationService: the publisher of the refactored design.

Formatting is delegated to a FormattingStrategy and delivery to the
attached Subscribers, so new formats or channels need no change here.
"""

from typing import List, Optional

from tasks.notification.formatters import FormattingStrategy
from tasks.notification.subscribers import Subscriber


class NotificationError(Exception):
    """Raised when the service is not configured to send."""
    pass


class NotificationService:
    """
    Formats an alert once and fans it out to every attached subscriber.

    Attributes:
        subscribers: Copy of the attached subscribers, in attach order
    """

    def __init__(self, formatter: Optional[FormattingStrategy] = None):
        """
        Initialize service.

        Args:
            formatter: Formatting strategy; may be set later with set_strategy()
        """
        self._formatter = formatter
        self._subscribers: List[Subscriber] = []

    def set_strategy(self, formatter: FormattingStrategy) -> None:
        """
        Replace the formatting strategy used by later notify() calls.

        Args:
            formatter: New formatting strategy
        """
        self._formatter = formatter

    def attach(self, subscriber: Subscriber) -> None:
        """
        Add a delivery channel.

        Args:
            subscriber: Channel notified after those already attached
        """
        self._subscribers.append(subscriber)

    def detach(self, subscriber: Subscriber) -> None:
        """
        Remove a delivery channel.

        Args:
            subscriber: Channel to remove; unknown channels are ignored
        """
        if subscriber in self._subscribers:
            self._subscribers.remove(subscriber)

    @property
    def subscribers(self) -> List[Subscriber]:
        """Attached subscribers in notification order."""
        return list(self._subscribers)

    def notify(self, message: str, severity: str) -> List[str]:
        """
        Format once and fan out to every subscriber.

        Args:
            message: Alert text
            severity: Alert level ("info", "warning", "critical", ...)

        Returns:
            Status codes of the subscribers that delivered

        Raises:
            NotificationError: If no formatting strategy is set
        """
        if self._formatter is None:
            raise NotificationError("No formatting strategy set")

        formatted = self._formatter.format(message, severity)
        results = []
        for subscriber in self._subscribers:
            status = subscriber.update(formatted, severity)
            if status is not None:
                results.append(status)
        return results
