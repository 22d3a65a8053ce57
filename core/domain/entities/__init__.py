from .order import DEFAULT_PAYMENT_METHOD, Item, Order

__all__ = ["DEFAULT_PAYMENT_METHOD", "Item", "Order"]
