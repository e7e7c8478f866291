"""
Bridge pattern demo.

Payment types (one-time, subscription) vary independently from payment
gateways (Stripe, PayPal); a Payment holds a gateway and delegates to it.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Tuple


class PaymentGateway(ABC):
    """Implementor side of the bridge."""

    def __init__(self):
        self.charges: List[Tuple[str, float, Dict[str, str]]] = []

    @abstractmethod
    def charge(self, account_id: str, amount: float, metadata: Dict[str, str]) -> bool:
        """
        Charge an account.

        Args:
            account_id: Account to charge
            amount: Amount to charge
            metadata: Payment details supplied by the Payment side

        Returns:
            True if the gateway accepted the charge
        """
        pass


class StripeGateway(PaymentGateway):
    def charge(self, account_id: str, amount: float, metadata: Dict[str, str]) -> bool:
        print(f"Stripe: charging {amount} for {account_id}")
        self.charges.append((account_id, amount, metadata))
        return True


class PayPalGateway(PaymentGateway):
    def charge(self, account_id: str, amount: float, metadata: Dict[str, str]) -> bool:
        print(f"PayPal: charging {amount} for {account_id}")
        self.charges.append((account_id, amount, metadata))
        return True


class Payment(ABC):
    """Abstraction side of the bridge."""

    def __init__(self, gateway: PaymentGateway):
        self.gateway = gateway

    @abstractmethod
    def pay(self, account_id: str, amount: float) -> bool:
        """Pay through the configured gateway; returns the gateway's answer."""
        pass



class OneTimePayment(Payment):
    def pay(self, account_id: str, amount: float) -> bool:
        return self.gateway.charge(account_id, amount, {"type": "one-time"})


class SubscriptionPayment(Payment):
    def pay(self, account_id: str, amount: float) -> bool:
        return self.gateway.charge(account_id, amount, {"type": "subscription"})


def main():
    one_time_via_stripe = OneTimePayment(StripeGateway())
    sub_via_paypal = SubscriptionPayment(PayPalGateway())

    one_time_via_stripe.pay("acct-100", 49.99)
    sub_via_paypal.pay("acct-200", 9.99)


if __name__ == '__main__':
    main()
