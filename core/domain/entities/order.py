"""
Order aggregate root.

CRITICAL: This file must contain ZERO imports from:
- pydantic
"""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, List, Union
import logging

from ..enums import OrderStatus
from ..events.base import DomainEvent
from ..events.order_events import (
    OrderCreatedEvent,
    OrderItemAddedEvent,
    OrderItemRemovedEvent,
    OrderStatusChangedEvent,
)
from ..exceptions import InvalidOrderStateError


logger = logging.getLogger(__name__)

Price = Union[int, float, Decimal]

DEFAULT_PAYMENT_METHOD = "cash"


@dataclass(frozen=True)
class Item:
    """Priced line entry. Price is taken as given (no sign check)."""
    id: Any
    name: str
    price: Price


@dataclass
class Order:
    """
    Order aggregate root.

    Holds the items, the payment method and the lifecycle status.
    ``total`` is derived from ``items`` and recomputed on every change
    to the list; ``status`` only changes through pay/complete/cancel.
    """
    id: Any
    items: List[Item] = field(default_factory=list)
    payment_method: str = DEFAULT_PAYMENT_METHOD

    _total: Price = field(default=0, init=False, repr=False)
    _status: OrderStatus = field(default=OrderStatus.CREATED, init=False, repr=False)

    # Event collection
    _domain_events: List[DomainEvent] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self):
        # Callers keep ownership of the list they passed in
        self.items = list(self.items) if self.items is not None else []
        self._recalculate_total()
        self._record_event(
            OrderCreatedEvent(
                order_id=self.id,
                payment_method=self.payment_method,
                items_count=len(self.items),
                total=self.total,
            )
        )

    @property
    def total(self) -> Price:
        return self._total

    @property
    def status(self) -> OrderStatus:
        return self._status

    def __repr__(self) -> str:
        return (
            f"Order(id={self.id!r}, status={self._status.value!r}, "
            f"total={self._total!r}, items={self.items!r}, "
            f"payment_method={self.payment_method!r})"
        )

    # =========================================================================
    # ITEMS
    # =========================================================================

    def add_item(self, item: Item) -> None:
        """Add item and recalculate order total."""
        self.items.append(item)
        self._recalculate_total()
        self._record_event(
            OrderItemAddedEvent(
                order_id=self.id,
                item_id=item.id,
                price=item.price,
                total=self.total,
            )
        )

    def remove_item(self, item_id: Any) -> None:
        """
        Remove the first item with a matching id and recalculate total.

        Unknown ids are ignored.
        """
        for index, item in enumerate(self.items):
            if item.id == item_id:
                break
        else:
            return

        removed = self.items.pop(index)
        self._recalculate_total()
        self._record_event(
            OrderItemRemovedEvent(
                order_id=self.id,
                item_id=removed.id,
                price=removed.price,
                total=self.total,
            )
        )

    def _recalculate_total(self) -> None:
        """Internal: Sum all item prices."""
        self._total = sum(item.price for item in self.items)

    # =========================================================================
    # STATUS TRANSITIONS
    # =========================================================================

    def pay(self) -> None:
        """Business rule: only a freshly created order can be paid."""
        if not self._status.can_transition_to(OrderStatus.PAID):
            raise InvalidOrderStateError("Order cannot be paid", self._status, "pay")
        self._change_status(OrderStatus.PAID, "Order paid")

    def complete(self) -> None:
        """Business rule: payment must come before completion."""
        if not self._status.can_transition_to(OrderStatus.COMPLETED):
            raise InvalidOrderStateError(
                "Order must be paid before it can be completed", self._status, "complete"
            )
        self._change_status(OrderStatus.COMPLETED, "Order completed")

    def cancel(self) -> None:
        """
        Cancel a created or paid order.

        Raises:
            InvalidOrderStateError: If the order is completed or already cancelled
        """
        if not self._status.can_transition_to(OrderStatus.CANCELLED):
            if self._status is OrderStatus.COMPLETED:
                message = "Completed order cannot be cancelled"
            else:
                message = "Order is already cancelled"
            raise InvalidOrderStateError(message, self._status, "cancel")
        self._change_status(OrderStatus.CANCELLED, "Order cancelled")

    def _change_status(self, new_status: OrderStatus, reason: str) -> None:
        previous_status = self._status
        self._status = new_status
        logger.debug(
            "Order %s: %s -> %s", self.id, previous_status.value, new_status.value
        )
        self._record_event(
            OrderStatusChangedEvent(
                order_id=self.id,
                previous_status=previous_status.value,
                new_status=new_status.value,
                reason=reason,
            )
        )

    # =========================================================================
    # EVENT COLLECTION
    # =========================================================================

    def get_domain_events(self) -> List[DomainEvent]:
        """
        Get all domain events collected by this aggregate.

        Returns:
            Copy of the pending events list
        """
        return list(self._domain_events)

    def clear_domain_events(self) -> None:
        """Clear all collected domain events (after they were handled)."""
        self._domain_events.clear()

    def _record_event(self, event: DomainEvent) -> None:
        self._domain_events.append(event)

    def to_dict(self) -> Dict[str, Any]:
        """Plain dictionary view of the order state."""
        return {
            "id": self.id,
            "items": [
                {"id": item.id, "name": item.name, "price": item.price}
                for item in self.items
            ],
            "payment_method": self.payment_method,
            "status": self._status.value,
            "total": self.total,
        }
