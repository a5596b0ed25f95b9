"""Per-customer cart and wishlist.

Both hold product snapshots taken at insertion time. Later catalog edits do not
reach items that are already in a cart or wishlist.
"""

import logging
from datetime import datetime
from typing import Callable, List, Optional

from errors import InvalidInputError
from schemas import CartItem, Product, WishlistItem

logger = logging.getLogger(__name__)


class Cart:
    def __init__(self, customer_id: str):
        self.customer_id = customer_id
        self._items: List[CartItem] = []

    @property
    def items(self) -> List[CartItem]:
        return self.snapshot()

    def _find(self, product_id: str) -> Optional[CartItem]:
        for item in self._items:
            if item.product.id == product_id:
                return item
        return None

    def add_to_cart(self, product: Product, quantity: int = 1) -> CartItem:
        if quantity < 1:
            raise InvalidInputError(f"Quantity must be at least 1, got {quantity}")
        item = self._find(product.id)
        if item is not None:
            item.quantity += quantity
        else:
            item = CartItem(product=product.model_copy(deep=True), quantity=quantity)
            self._items.append(item)
        logger.debug("cart %s: %s x%d", self.customer_id, product.id, item.quantity)
        return item.model_copy(deep=True)

    def update_quantity(self, product_id: str, quantity: int) -> Optional[CartItem]:
        """Set the quantity; zero or less drops the line. Unknown ids are ignored."""
        item = self._find(product_id)
        if item is None:
            return None
        if quantity <= 0:
            self.remove_from_cart(product_id)
            return None
        item.quantity = quantity
        return item.model_copy(deep=True)

    def remove_from_cart(self, product_id: str) -> bool:
        before = len(self._items)
        self._items = [i for i in self._items if i.product.id != product_id]
        return len(self._items) < before

    def clear_cart(self) -> None:
        self._items = []

    def get_total_items(self) -> int:
        return sum(i.quantity for i in self._items)

    def get_total_price(self) -> float:
        """Sum of price x quantity, before tax."""
        return sum(i.line_total for i in self._items)

    def snapshot(self) -> List[CartItem]:
        return [i.model_copy(deep=True) for i in self._items]

    def __len__(self):
        return len(self._items)


class Wishlist:
    def __init__(self, customer_id: str, clock: Callable[[], datetime] = datetime.now):
        self.customer_id = customer_id
        self._clock = clock
        self._items: List[WishlistItem] = []

    @property
    def items(self) -> List[WishlistItem]:
        return [i.model_copy(deep=True) for i in self._items]

    def add_to_wishlist(self, product: Product) -> WishlistItem:
        for item in self._items:
            if item.product.id == product.id:
                return item.model_copy(deep=True)
        item = WishlistItem(product=product.model_copy(deep=True), added_at=self._clock())
        self._items.append(item)
        return item.model_copy(deep=True)

    def remove_from_wishlist(self, product_id: str) -> bool:
        before = len(self._items)
        self._items = [i for i in self._items if i.product.id != product_id]
        return len(self._items) < before

    def is_in_wishlist(self, product_id: str) -> bool:
        return any(i.product.id == product_id for i in self._items)

    def clear_wishlist(self) -> None:
        self._items = []

    def __len__(self):
        return len(self._items)
