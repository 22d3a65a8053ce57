"""Domain events collected by the Order aggregate."""
from .base import DomainEvent
from .order_events import (
    OrderCreatedEvent,
    OrderItemAddedEvent,
    OrderItemRemovedEvent,
    OrderStatusChangedEvent,
)

__all__ = [
    "DomainEvent",
    "OrderCreatedEvent",
    "OrderItemAddedEvent",
    "OrderItemRemovedEvent",
    "OrderStatusChangedEvent",
]
