"""
Order Domain Events.

Events that occur during the order lifecycle.
"""
from dataclasses import dataclass
from typing import Any, Optional

from .base import DomainEvent


@dataclass
class _OrderEvent(DomainEvent):
    """Common base: every order event is keyed by the order id."""

    order_id: Any = None

    def __post_init__(self):
        """Set aggregate_id to order_id."""
        if not self.aggregate_id and self.order_id is not None:
            object.__setattr__(self, "aggregate_id", str(self.order_id))
        super().__post_init__()


@dataclass
class OrderCreatedEvent(_OrderEvent):
    """Order was created, possibly with an initial list of items."""

    payment_method: str = ""
    items_count: int = 0
    total: Any = 0


@dataclass
class OrderItemAddedEvent(_OrderEvent):
    """An item was appended to the order."""

    item_id: Any = None
    price: Any = 0
    total: Any = 0


@dataclass
class OrderItemRemovedEvent(_OrderEvent):
    """
    An item was removed from the order.

    Not recorded when remove_item() finds no matching id.
    """

    item_id: Any = None
    price: Any = 0
    total: Any = 0


@dataclass
class OrderStatusChangedEvent(_OrderEvent):
    """
    Order status changed.

    Tracks transitions (created -> paid -> completed, or -> cancelled).
    """

    previous_status: str = ""
    new_status: str = ""
    reason: Optional[str] = None
