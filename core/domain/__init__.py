"""Domain layer - pure domain models, no framework imports."""

from .entities import DEFAULT_PAYMENT_METHOD, Item, Order
from .enums import OrderStatus
from .exceptions import InvalidOrderStateError

__all__ = [
    "DEFAULT_PAYMENT_METHOD",
    "InvalidOrderStateError",
    "Item",
    "Order",
    "OrderStatus",
]
