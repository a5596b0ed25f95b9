"""
The catalog & order store.

One object owns every collection (catalog, orders, carts, wishlists, filters,
analytics) and is handed explicitly to whoever needs it. Callers only go
through the methods below; the collections themselves are never shared.
"""

import logging
from datetime import datetime
from typing import Callable, Dict, Iterable, List, Optional

from pydantic import ValidationError

import queries
from cart import Cart, Wishlist
from config import Settings, load_settings
from errors import EmptyCartError, InvalidInputError
from inventory import InventoryLedger
from notifications import NotificationCenter
from orders import OrderLifecycleManager, order_progress
from schemas import (
    Actor,
    AnalyticsSnapshot,
    BulkProductPatch,
    CartItem,
    Category,
    FilterCriteria,
    FilterPatch,
    Order,
    OrderDraft,
    OrderProgress,
    OrderStatus,
    PaymentMethod,
    PickupSlot,
    Product,
    ProductData,
    ProductPatch,
    WishlistItem,
)
from seed import initial_categories, initial_products

logger = logging.getLogger(__name__)


class Store:
    def __init__(self, settings: Optional[Settings] = None,
                 categories: Optional[Iterable[Category]] = None,
                 products: Optional[Iterable[Product]] = None,
                 clock: Callable[[], datetime] = datetime.now):
        self.settings = settings or load_settings()
        self._clock = clock
        self.notifications = NotificationCenter(clock)
        self.inventory = InventoryLedger(
            categories if categories is not None else initial_categories(),
            self.notifications, self.settings, clock,
        )
        if products is not None:
            self.inventory.load(products)
        elif self.settings.seed_catalog:
            self.inventory.load(initial_products())
        self.order_manager = OrderLifecycleManager(self.notifications, self.settings, clock)
        self._carts: Dict[str, Cart] = {}
        self._wishlists: Dict[str, Wishlist] = {}
        self._filters = FilterCriteria()
        self._search_query = ""
        self._analytics = AnalyticsSnapshot()

    # -----------------------------
    # Catalog
    # -----------------------------

    @property
    def products(self) -> List[Product]:
        return self.inventory.products

    @property
    def categories(self) -> List[Category]:
        return self.inventory.categories()

    def get_product(self, product_id: str) -> Optional[Product]:
        return self.inventory.get(product_id)

    def add_product(self, data: ProductData) -> Product:
        return self.inventory.add_product(data)

    def update_product(self, product_id: str, patch: ProductPatch) -> Optional[Product]:
        return self.inventory.update_product(product_id, patch)

    def delete_product(self, product_id: str) -> Optional[Product]:
        return self.inventory.delete_product(product_id)

    def bulk_update_products(self, rows: List[BulkProductPatch]) -> List[Product]:
        return self.inventory.bulk_update_products(rows)

    def low_stock_products(self) -> List[Product]:
        return self.inventory.low_stock_products()

    def low_stock_alerts(self) -> List[Product]:
        return self.inventory.low_stock_alerts()

    def get_products_by_category(self, category: str) -> List[Product]:
        return queries.products_by_category(self.products, category)

    def available_brands(self) -> List[str]:
        return queries.available_brands(self.products)

    def max_price(self) -> float:
        return queries.max_price(self.products)

    # -----------------------------
    # Search & filters
    # -----------------------------

    @property
    def filters(self) -> FilterCriteria:
        return self._filters.model_copy(deep=True)

    @property
    def search_query(self) -> str:
        return self._search_query

    def set_search_query(self, query: str) -> None:
        self._search_query = query

    def update_filters(self, patch: FilterPatch) -> FilterCriteria:
        changes = patch.model_dump(exclude_unset=True)
        try:
            self._filters = FilterCriteria.model_validate({**self._filters.model_dump(), **changes})
        except ValidationError as e:
            raise InvalidInputError(str(e)) from e
        return self.filters

    def reset_filters(self) -> FilterCriteria:
        self._filters = FilterCriteria()
        return self.filters

    def search_products(self, query: str) -> List[Product]:
        return queries.search_products(self.products, query)

    def search_suggestions(self, query: Optional[str] = None) -> List[str]:
        """Suggestions for ``query``, or for the session query when none is given."""
        query = self._search_query if query is None else query
        return queries.search_suggestions(self.products, query, self.settings.suggestion_limit)

    def get_filtered_products(self, query: Optional[str] = None) -> List[Product]:
        """Run the filter pipeline. An explicit ``query`` leaves the session query alone."""
        query = self._search_query if query is None else query
        return queries.filter_products(self.products, self._filters, query)

    # -----------------------------
    # Carts & wishlists
    # -----------------------------

    def cart_for(self, customer_id: str) -> Cart:
        if customer_id not in self._carts:
            self._carts[customer_id] = Cart(customer_id)
        return self._carts[customer_id]

    def wishlist_for(self, customer_id: str) -> Wishlist:
        if customer_id not in self._wishlists:
            self._wishlists[customer_id] = Wishlist(customer_id, self._clock)
        return self._wishlists[customer_id]

    def peek_cart(self, customer_id: str) -> Cart:
        # Reads must not register a cart for every id that gets looked up
        cart = self._carts.get(customer_id)
        return cart if cart is not None else Cart(customer_id)

    def peek_wishlist(self, customer_id: str) -> Wishlist:
        wishlist = self._wishlists.get(customer_id)
        return wishlist if wishlist is not None else Wishlist(customer_id, self._clock)

    def has_cart(self, customer_id: str) -> bool:
        return customer_id in self._carts

    def has_wishlist(self, customer_id: str) -> bool:
        return customer_id in self._wishlists

    def add_to_cart(self, customer_id: str, product_id: str, quantity: int = 1) -> CartItem:
        product = self.inventory.require(product_id)
        return self.cart_for(customer_id).add_to_cart(product, quantity)

    def add_to_wishlist(self, customer_id: str, product_id: str) -> WishlistItem:
        product = self.inventory.require(product_id)
        return self.wishlist_for(customer_id).add_to_wishlist(product)

    # -----------------------------
    # Orders
    # -----------------------------

    @property
    def orders(self) -> List[Order]:
        return self.order_manager.orders

    def get_order(self, order_id: str) -> Optional[Order]:
        return self.order_manager.get(order_id)

    def add_order(self, draft: OrderDraft) -> str:
        order = self.order_manager.add_order(draft)
        self.update_analytics()
        return order.id

    def checkout(self, actor: Actor, slot: PickupSlot = PickupSlot.thirty_minutes,
                 payment_method: PaymentMethod = PaymentMethod.cash,
                 notes: Optional[str] = None) -> Order:
        """Turn the actor's cart into an order and empty the cart."""
        if not len(self.peek_cart(actor.id)):
            raise EmptyCartError(actor.id)
        cart = self.cart_for(actor.id)
        draft = OrderDraft(
            customer_id=actor.id,
            customer_name=actor.name,
            items=cart.snapshot(),
            selected_time_slot=slot,
            payment_method=payment_method,
            notes=notes,
        )
        order_id = self.add_order(draft)
        cart.clear_cart()
        return self.order_manager.require(order_id)

    def update_order_status(self, order_id: str, status: OrderStatus) -> Optional[Order]:
        return self.order_manager.update_order_status(order_id, status)

    def get_orders_by_status(self, status: OrderStatus) -> List[Order]:
        return self.order_manager.get_orders_by_status(status)

    def get_orders_for_customer(self, customer_id: str) -> List[Order]:
        return self.order_manager.get_orders_for_customer(customer_id)

    def order_progress(self, order_id: str) -> OrderProgress:
        return order_progress(self.order_manager.require(order_id))

    # -----------------------------
    # Analytics
    # -----------------------------

    def get_recommended_products(self, customer_id: str) -> List[Product]:
        return queries.recommended_products(
            self.products,
            self.order_manager.orders,
            customer_id,
            top_categories=self.settings.recommendation_categories,
            limit=self.settings.recommendation_limit,
        )

    @property
    def analytics(self) -> AnalyticsSnapshot:
        return self._analytics.model_copy(deep=True)

    def update_analytics(self) -> AnalyticsSnapshot:
        self._analytics = queries.compute_analytics(
            self.order_manager.orders,
            self.inventory.category_names(),
            self.settings.top_sellers_limit,
        )
        return self.analytics
