"""
Delivery channels (observers) for the notification service.

All channels are stubs: they print what they would send and append it to
a shared history list.
"""

from typing import List, Optional, Protocol


class Subscriber(Protocol):
    def update(self, formatted_message: str, severity: str) -> Optional[str]:
        """
        Deliver a formatted alert.

        Args:
            formatted_message: Output of the service's formatting strategy
            severity: Alert level, used by channels that filter

        Returns:
            Status code, or None if the channel skipped the alert
        """
        ...


class _HistorySubscriber:
    """Shared plumbing: print the output and record it in history."""

    def __init__(self, history: List[str]):
        """
        Args:
            history: List every delivered line is appended to
        """
        self.history = history

    def _emit(self, output: str) -> None:
        print(output)
        self.history.append(output)


class EmailSubscriber(_HistorySubscriber):
    """Emails every alert to the admin mailbox."""

    RECIPIENT = "admin@company.com"

    def update(self, formatted_message: str, severity: str) -> Optional[str]:
        """Send the alert by email. Always returns EMAIL_SENT."""
        self._emit(f"Email sent to {self.RECIPIENT}: {formatted_message}")
        return "EMAIL_SENT"


class SmsSubscriber(_HistorySubscriber):
    """Only critical alerts go out by SMS."""

    NUMBER = "555-0199"

    def update(self, formatted_message: str, severity: str) -> Optional[str]:
        """
        Text the on-call number when the alert is critical.

        Returns:
            SMS_SENT, or None for any other severity
        """
        if severity != "critical":
            print("SMS skipped (not critical)")
            return None
        self._emit(f"SMS sent to {self.NUMBER}: {formatted_message}")
        return "SMS_SENT"


class DiskLogSubscriber(_HistorySubscriber):
    """Writes every alert to the (simulated) disk log."""

    def update(self, formatted_message: str, severity: str) -> Optional[str]:
        """Append the alert to the log. Always returns LOGGED."""
        self._emit(f"Writing to disk: {formatted_message}")
        return "LOGGED"
