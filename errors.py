class StoreError(Exception):
    """Base class for errors raised by the store"""


class NotFoundError(StoreError):
    def __init__(self, kind: str, identifier: str):
        super().__init__(f"{kind} not found: {identifier}")
        self.kind = kind
        self.identifier = identifier


class InvalidInputError(StoreError):
    pass


class EmptyCartError(StoreError):
    def __init__(self, customer_id: str):
        super().__init__(f"Cart is empty for customer {customer_id}")
        self.customer_id = customer_id


class InvalidTransitionError(StoreError):
    def __init__(self, order_id: str, current, requested):
        super().__init__(f"Order {order_id} cannot move from {current.value} to {requested.value}")
        self.order_id = order_id
        self.current = current
        self.requested = requested
