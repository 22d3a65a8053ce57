"""Application service for Order lifecycle operations."""

from typing import Any, Callable, Iterable, List, Optional

from core.domain.entities.order import Item, Order
from core.domain.events.base import DomainEvent
from core.domain.exceptions import InvalidOrderStateError
from core.infrastructure.logging import get_logger
from core.settings import OrderSettings, get_order_settings


class OrderLifecycleService:
    """
    Application service for driving orders through their lifecycle.

    Responsibilities:
    - Apply configured defaults when creating orders
    - Delegate business rules to the Order aggregate
    - Log every operation and drain the aggregate's domain events

    The service holds no storage: callers own the Order instances.
    """

    def __init__(self, settings: Optional[OrderSettings] = None) -> None:
        """Initialize order lifecycle service.

        Args:
            settings: Order settings; the cached app settings when omitted
        """
        self._settings = settings or get_order_settings()
        self._logger = get_logger(__name__, self._settings.log_level)

    def create_order(
        self,
        order_id: Any,
        items: Optional[Iterable[Item]] = None,
        payment_method: Optional[str] = None,
    ) -> Order:
        """Create a new order.

        Args:
            order_id: Order identifier
            items: Initial items, in order
            payment_method: Defaults to the configured payment method

        Returns:
            New Order with its creation event still pending
        """
        order = Order(
            order_id,
            list(items or []),
            self._settings.default_payment_method if payment_method is None else payment_method,
        )
        self._logger.info(
            f"Order created: {order.id} "
            f"(items: {len(order.items)}, total: {order.total}, payment: {order.payment_method})"
        )
        return order

    def add_item(self, order: Order, item: Item) -> List[DomainEvent]:
        order.add_item(item)
        self._logger.info(f"Item {item.id} added to order {order.id} (total: {order.total})")
        return self._drain_events(order)

    def remove_item(self, order: Order, item_id: Any) -> List[DomainEvent]:
        count_before = len(order.items)
        order.remove_item(item_id)
        if len(order.items) == count_before:
            self._logger.info(f"Item {item_id} not in order {order.id}, nothing removed")
        else:
            self._logger.info(f"Item {item_id} removed from order {order.id} (total: {order.total})")
        return self._drain_events(order)

    def pay(self, order: Order) -> List[DomainEvent]:
        return self._transition(order, "pay", order.pay)

    def complete(self, order: Order) -> List[DomainEvent]:
        return self._transition(order, "complete", order.complete)

    def cancel(self, order: Order) -> List[DomainEvent]:
        return self._transition(order, "cancel", order.cancel)

    def _transition(
        self, order: Order, action: str, apply: Callable[[], None]
    ) -> List[DomainEvent]:
        """Run a status transition, logging rejections before re-raising."""
        previous_status = order.status
        try:
            apply()
        except InvalidOrderStateError as e:
            self._logger.warning(
                f"Order {order.id}: {action} rejected in status '{e.current_status.value}': {e}"
            )
            raise

        self._logger.info(
            f"Order {order.id}: {previous_status.value} -> {order.status.value}"
        )
        return self._drain_events(order)

    def _drain_events(self, order: Order) -> List[DomainEvent]:
        events = order.get_domain_events()
        order.clear_domain_events()
        for event in events:
            self._logger.debug(f"Domain event: {event.event_type} (aggregate: {event.aggregate_id})")
        return events
