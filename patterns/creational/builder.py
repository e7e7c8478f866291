"""
Builder pattern demo.

PersonBuilder collects required and optional fields step by step and
validates them in build().
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Person:
    first_name: str
    last_name: str
    email: Optional[str] = None


class PersonBuilder:
    """Fluent builder; every setter returns the builder."""

    def __init__(self):
        self._first_name: Optional[str] = None
        self._last_name: Optional[str] = None
        self._email: Optional[str] = None

    def first_name(self, first_name: str) -> "PersonBuilder":
        """Required."""
        self._first_name = first_name
        return self

    def last_name(self, last_name: str) -> "PersonBuilder":
        """Required."""
        self._last_name = last_name
        return self

    def email(self, email: str) -> "PersonBuilder":
        """Optional."""
        self._email = email
        return self

    def build(self) -> Person:
        """
        Build the Person.

        Raises:
            ValueError: If first or last name is missing
        """
        if not self._first_name or not self._last_name:
            raise ValueError("first_name and last_name are required")
        return Person(self._first_name, self._last_name, self._email)


def main():
    PersonBuilder().first_name("Ada").last_name("Lovelace").build()
    print("Successfully created person 1")

    try:
        PersonBuilder().first_name("Ada").email("ada@example.com").build()
        print("Successfully created person 2")
    except ValueError as e:
        print(f"Could not create person 2: {e}")


if __name__ == '__main__':
    main()
