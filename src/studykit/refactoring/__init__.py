from . import notifications, shopping_cart, shapes, user_manager, payments

__all__ = ["notifications", "shopping_cart", "shapes", "user_manager", "payments"]
