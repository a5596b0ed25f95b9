"""
Order lifecycle: placing orders from cart snapshots and moving them through

    pending -> preparing -> ready -> completed

with cancelled reachable from any state that is not yet completed.

Orders are never deleted. Totals are fixed when the order is placed.
"""

import logging
from datetime import datetime
from typing import Callable, Dict, List, Optional

from config import Settings
from errors import EmptyCartError, InvalidInputError, InvalidTransitionError, NotFoundError
from notifications import ADMIN_CHANNEL, NotificationCenter
from schemas import (
    STATUS_SEQUENCE,
    NotificationType,
    Order,
    OrderDraft,
    OrderProgress,
    OrderStatus,
)

logger = logging.getLogger(__name__)

STATUS_MESSAGES: Dict[OrderStatus, str] = {
    OrderStatus.preparing: "Your order is being prepared",
    OrderStatus.ready: "Your order is ready for pickup!",
    OrderStatus.completed: "Thank you for your order!",
    OrderStatus.cancelled: "Your order has been cancelled",
}

STATUS_LABELS: Dict[OrderStatus, str] = {
    OrderStatus.pending: "Order Placed",
    OrderStatus.preparing: "Preparing Order",
    OrderStatus.ready: "Ready for Pickup",
    OrderStatus.completed: "Order Completed",
    OrderStatus.cancelled: "Order Cancelled",
}


def as_status(value) -> OrderStatus:
    """Accept an OrderStatus or its plain label."""
    try:
        return OrderStatus(value)
    except ValueError:
        raise InvalidInputError(f"Unknown order status: {value!r}") from None


def can_transition(current: OrderStatus, new: OrderStatus) -> bool:
    """Forward moves only; cancelled is reachable from any open state."""
    current, new = as_status(current), as_status(new)
    if current.is_terminal:
        return False
    if new == OrderStatus.cancelled:
        return True
    return STATUS_SEQUENCE.index(new) > STATUS_SEQUENCE.index(current)


def order_total(subtotal: float, tax_rate: float) -> float:
    return subtotal + subtotal * tax_rate


def order_progress(order: Order) -> OrderProgress:
    step = -1 if order.status == OrderStatus.cancelled else STATUS_SEQUENCE.index(order.status)
    return OrderProgress(order_id=order.id, status=order.status, step=step,
                         label=STATUS_LABELS[order.status])


class OrderLifecycleManager:
    def __init__(self, notifier: NotificationCenter, settings: Settings,
                 clock: Callable[[], datetime] = datetime.now):
        self._orders: List[Order] = []
        self._notifier = notifier
        self._settings = settings
        self._clock = clock
        self._last_stamp = 0

    @property
    def orders(self) -> List[Order]:
        return [o.model_copy(deep=True) for o in self._orders]

    def _new_id(self) -> str:
        stamp = int(self._clock().timestamp() * 1000)
        self._last_stamp = max(stamp, self._last_stamp + 1)
        return f"ORDER-{self._last_stamp}"

    def get(self, order_id: str) -> Optional[Order]:
        for o in self._orders:
            if o.id == order_id:
                return o.model_copy(deep=True)
        return None

    def require(self, order_id: str) -> Order:
        order = self.get(order_id)
        if order is None:
            raise NotFoundError("Order", order_id)
        return order

    def add_order(self, draft: OrderDraft) -> Order:
        if not draft.items:
            logger.warning("Rejected empty order for customer %s", draft.customer_id)
            raise EmptyCartError(draft.customer_id)

        now = self._clock()
        items = [i.model_copy(deep=True) for i in draft.items]
        subtotal = sum(i.line_total for i in items)
        order = Order(
            id=self._new_id(),
            customer_id=draft.customer_id,
            customer_name=draft.customer_name,
            items=items,
            total=order_total(subtotal, self._settings.tax_rate),
            status=OrderStatus.pending,
            timestamp=now,
            pickup_time=now + draft.selected_time_slot.offset,
            selected_time_slot=draft.selected_time_slot,
            payment_method=draft.payment_method,
            notes=draft.notes,
        )
        self._orders.append(order)
        logger.info("Order %s placed by %s, total %.2f", order.id, order.customer_id, order.total)

        self._notifier.add_notification(
            ADMIN_CHANNEL,
            "New Order Received",
            f"Order {order.id} from {order.customer_name} - ₹{order.total:.2f}",
            NotificationType.info,
        )
        self._notifier.add_notification(
            order.customer_id,
            "Order Confirmed",
            f"Your order {order.id} has been placed successfully. "
            f"Pickup in {order.selected_time_slot.value}.",
            NotificationType.success,
        )
        return order.model_copy(deep=True)

    def update_order_status(self, order_id: str, status: OrderStatus) -> Optional[Order]:
        """Move an order to ``status``. Returns None for an unknown id.

        Raises InvalidTransitionError on a backward move or when the order is
        already completed or cancelled.
        """
        status = as_status(status)
        order = next((o for o in self._orders if o.id == order_id), None)
        if order is None:
            logger.warning("Status update skipped, no order %s", order_id)
            return None
        if not can_transition(order.status, status):
            logger.warning("Rejected %s -> %s for order %s", order.status.value, status.value, order_id)
            raise InvalidTransitionError(order_id, order.status, status)

        order.status = status
        logger.info("Order %s is now %s", order_id, status.value)
        self._notifier.add_notification(
            order.customer_id,
            "Order Status Update",
            f"Order {order_id}: {STATUS_MESSAGES[status]}",
            NotificationType.success if status == OrderStatus.ready else NotificationType.info,
        )
        return order.model_copy(deep=True)

    def get_orders_by_status(self, status: OrderStatus) -> List[Order]:
        status = as_status(status)
        return [o.model_copy(deep=True) for o in self._orders if o.status == status]

    def get_orders_for_customer(self, customer_id: str) -> List[Order]:
        return [o.model_copy(deep=True) for o in self._orders if o.customer_id == customer_id]
