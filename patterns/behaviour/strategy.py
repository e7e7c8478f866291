"""
Strategy pattern demo.

A ShoppingCart delegates its discount calculation to an interchangeable
DiscountStrategy.
"""

from typing import Protocol


class DiscountStrategy(Protocol):
    def apply(self, price: float) -> float:
        """
        Args:
            price: Price before discount

        Returns:
            Price after discount
        """
        ...


class NoDiscount:
    def apply(self, price: float) -> float:
        return price


class PercentageDiscount:
    """Take a fraction off the price (0.2 means 20% off)."""

    def __init__(self, percent: float):
        """
        Args:
            percent: Fraction taken off, between 0 and 1

        Raises:
            ValueError: If percent is outside [0, 1]
        """
        if not 0 <= percent <= 1:
            raise ValueError(f"percent must be between 0 and 1, got {percent}")
        self.percent = percent

    def apply(self, price: float) -> float:
        return price * (1 - self.percent)


class FixedAmountDiscount:
    """Subtract a fixed amount, never going below zero."""

    def __init__(self, amount: float):
        self.amount = amount

    def apply(self, price: float) -> float:
        return max(0.0, price - self.amount)


class ShoppingCart:
    """Context using a discount strategy."""

    def __init__(self, discount: DiscountStrategy):
        self.discount = discount

    def set_discount(self, discount: DiscountStrategy) -> None:
        """Swap the strategy used by later checkouts."""
        self.discount = discount

    def checkout(self, total_price: float) -> float:
        """
        Price to pay.

        Args:
            total_price: Cart total before discount

        Returns:
            Total with the current discount applied
        """
        return self.discount.apply(total_price)



def main():
    cart = ShoppingCart(NoDiscount())
    print(cart.checkout(100))  # 100

    cart.set_discount(PercentageDiscount(0.2))
    print(cart.checkout(100))  # 80.0

    cart.set_discount(FixedAmountDiscount(15))
    print(cart.checkout(100))  # 85.0


if __name__ == '__main__':
    main()
