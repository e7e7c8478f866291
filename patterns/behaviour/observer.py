"""
Observer pattern demo.

A Button (subject) notifies every registered click listener (observer).
"""

from typing import List, Protocol


class ClickListener(Protocol):
    """Observer interface."""

    def on_click(self, info: str) -> str:
        ...


class TriggerApiClickListener:
    def on_click(self, info: str) -> str:
        message = f"Clicked! Trigger API with info: {info}"
        print(message)
        return message


class TrackerClickListener:
    def on_click(self, info: str) -> str:
        message = f"Clicked! Track user activity with info: {info}"
        print(message)
        return message


class Button:
    """Subject holding the listener list."""

    def __init__(self):
        self._listeners: List[ClickListener] = []

    def add_click_listener(self, listener: ClickListener) -> None:
        """
        Register a listener.

        Args:
            listener: Notified after the listeners already registered
        """
        self._listeners.append(listener)

    def remove_click_listener(self, listener: ClickListener) -> None:
        """Remove a listener; unknown listeners are ignored."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    @property
    def listener_count(self) -> int:
        """Number of registered listeners."""
        return len(self._listeners)


    def click(self, info: str) -> List[str]:
        """
        Simulate a click and notify all listeners in registration order.

        Returns:
            What each listener reported
        """
        return [listener.on_click(info) for listener in list(self._listeners)]


def main():
    button = Button()

    trigger_api = TriggerApiClickListener()
    tracker = TrackerClickListener()
    button.add_click_listener(trigger_api)
    button.add_click_listener(tracker)

    print("First click (both listeners):")
    button.click("user1")

    button.remove_click_listener(tracker)

    print("Second click (after removing tracker):")
    button.click("user2")


if __name__ == '__main__':
    main()
