"""
Decorator pattern demo.

Condiment decorators wrap a Beverage and extend its description and cost;
they can be stacked in any order.
"""

from abc import ABC, abstractmethod


class Beverage(ABC):
    @abstractmethod
    def get_description(self) -> str:
        pass

    @abstractmethod
    def cost(self) -> float:
        """Price in dollars, including every wrapped condiment."""
        pass


    def __str__(self) -> str:
        return f"{self.get_description()} -> ${self.cost():.2f}"


class SimpleCoffee(Beverage):
    def get_description(self) -> str:
        return "Simple Coffee"

    def cost(self) -> float:
        return 2.0


class BeverageDecorator(Beverage):
    """Base decorator; passes everything through to the wrapped beverage."""

    def __init__(self, inner: Beverage):
        self.inner = inner

    def get_description(self) -> str:
        return self.inner.get_description()

    def cost(self) -> float:
        return self.inner.cost()


class MilkDecorator(BeverageDecorator):
    def get_description(self) -> str:
        return self.inner.get_description() + ", Milk"

    def cost(self) -> float:
        return self.inner.cost() + 0.5


class SugarDecorator(BeverageDecorator):
    def get_description(self) -> str:
        return self.inner.get_description() + ", Sugar"

    def cost(self) -> float:
        return self.inner.cost() + 0.2


def main():
    basic = SimpleCoffee()
    print(basic)

    with_milk = MilkDecorator(basic)
    print(with_milk)

    with_milk_and_sugar = SugarDecorator(with_milk)
    print(with_milk_and_sugar)

    fancy = SugarDecorator(MilkDecorator(SimpleCoffee()))
    print(fancy)


if __name__ == '__main__':
    main()
