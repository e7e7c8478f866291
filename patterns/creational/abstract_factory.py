"""
Abstract Factory pattern demo.

Each UiFactory builds a consistent family of widgets (Windows or MacOS);
the Renderer only knows the abstract factory.
"""

from abc import ABC, abstractmethod
from typing import List


class Button(ABC):
    @abstractmethod
    def paint(self) -> str:
        pass


class Checkbox(ABC):
    @abstractmethod
    def paint(self) -> str:
        pass


class WindowsButton(Button):
    def paint(self) -> str:
        return "Rendering a Windows button."


class WindowsCheckbox(Checkbox):
    def paint(self) -> str:
        return "Rendering a Windows checkbox."


class MacButton(Button):
    def paint(self) -> str:
        return "Rendering a MacOS button."


class MacCheckbox(Checkbox):
    def paint(self) -> str:
        return "Rendering a MacOS checkbox."


class UiFactory(ABC):
    """Creates each product of one family."""

    @abstractmethod
    def create_button(self) -> Button:
        pass

    @abstractmethod
    def create_checkbox(self) -> Checkbox:
        pass


class WindowsFactory(UiFactory):
    def create_button(self) -> Button:
        return WindowsButton()

    def create_checkbox(self) -> Checkbox:
        return WindowsCheckbox()


class MacFactory(UiFactory):
    def create_button(self) -> Button:
        return MacButton()

    def create_checkbox(self) -> Checkbox:
        return MacCheckbox()


class Renderer:
    """Cross-platform renderer."""

    def __init__(self, factory: UiFactory):
        self.factory = factory

    def render(self) -> List[str]:
        """
        Paint one widget of each kind from the factory's family.

        Returns:
            The painted lines, button first
        """
        widgets = [self.factory.create_button(), self.factory.create_checkbox()]
        lines = [widget.paint() for widget in widgets]
        for line in lines:
            print(line)
        return lines


def main():
    print("Using Windows family:")
    Renderer(WindowsFactory()).render()

    print("\nUsing MacOS family:")
    Renderer(MacFactory()).render()


if __name__ == '__main__':
    main()
