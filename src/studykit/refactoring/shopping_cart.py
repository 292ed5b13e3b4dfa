from abc import ABC, abstractmethod
from typing import Iterable, Union

from loguru import logger

from studykit.models.records import CartItem
from studykit.utils.registry import register_demo

Item = Union[CartItem, dict]


def _item(item: Item) -> CartItem:
    return item if isinstance(item, CartItem) else CartItem(**item)


class TypeSwitchShoppingCart:
    """Totals and discounts in one method, unknown types silently add nothing."""

    def calculate_total(self, items: Iterable[Item]) -> float:
        total = 0.0
        for item in map(_item, items):
            if item.type == "book":
                total += item.price * 0.9
            elif item.type == "electronics":
                total += item.price
        return total


class Discount(ABC):
    @abstractmethod
    def apply_discount(self, item: CartItem) -> float:
        ...


class BookDiscount(Discount):
    def apply_discount(self, item: CartItem) -> float:
        return item.price * 0.9


class ElectronicsDiscount(Discount):
    def apply_discount(self, item: CartItem) -> float:
        return item.price


class DiscountFactory:
    @staticmethod
    def get_discount(item_type: str) -> Discount:
        if item_type == "book":
            return BookDiscount()
        elif item_type == "electronics":
            return ElectronicsDiscount()
        raise ValueError("Unsupported item type")


class ShoppingCart:
    def calculate_total(self, items: Iterable[Item]) -> float:
        total = 0.0
        for item in map(_item, items):
            strategy = DiscountFactory.get_discount(item.type)
            total += strategy.apply_discount(item)
        return total


@register_demo("shopping_cart")
def demo():
    items = [{"type": "book", "price": 100}, {"type": "electronics", "price": 200}]
    logger.info(TypeSwitchShoppingCart().calculate_total(items))
    logger.info(ShoppingCart().calculate_total(items))


if __name__ == "__main__":
    demo()
