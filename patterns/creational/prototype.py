"""
Prototype pattern demo.

New Person objects are produced by cloning a prototype; the mutable
Address is deep-copied so clones never share it with the prototype.
"""

import copy
from dataclasses import dataclass


@dataclass
class Address:
    city: str


@dataclass
class Person:
    name: str
    age: int
    address: Address

    def clone(self) -> "Person":
        """Deep clone, including the address."""
        return copy.deepcopy(self)


def main():
    prototype = Person("Alice", 30, Address("Jakarta"))

    p1 = prototype.clone()
    p1.name = "Bob"
    p1.address.city = "Bandung"

    p2 = prototype.clone()
    p2.name = "Cara"
    p2.age = 28

    print(f"prototype: {prototype}")
    print(f"p1: {p1}")
    print(f"p2: {p2}")


if __name__ == '__main__':
    main()
