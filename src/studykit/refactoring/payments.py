from abc import ABC, abstractmethod

from loguru import logger

from studykit.utils.registry import register_demo


class PaymentStrategy(ABC):
    @abstractmethod
    def pay(self, amount: float) -> str:
        ...


class PayPalPayment(PaymentStrategy):
    def pay(self, amount: float) -> str:
        message = f"Paid {amount} using PayPal."
        logger.info(message)
        return message


class StripePayment(PaymentStrategy):
    def pay(self, amount: float) -> str:
        message = f"Paid {amount} using Stripe."
        logger.info(message)
        return message


class HardwiredPaymentProcessor:
    """Always pays through PayPal, switching providers means editing this class."""

    def __init__(self):
        self.payment_method = PayPalPayment()

    def process_payment(self, amount: float) -> str:
        return self.payment_method.pay(amount)


class PaymentProcessor:
    def __init__(self, payment_method: PaymentStrategy):
        self.payment_method = payment_method

    def process_payment(self, amount: float) -> str:
        return self.payment_method.pay(amount)


@register_demo("payments")
def demo():
    HardwiredPaymentProcessor().process_payment(100)

    PaymentProcessor(PayPalPayment()).process_payment(100)
    PaymentProcessor(StripePayment()).process_payment(150)


if __name__ == "__main__":
    demo()
