"""
Inventory ledger: the product catalog and the fixed category list.

Category counts and low-stock lists are derived from the current catalog on
every call; nothing here keeps a running tally.
"""

import logging
from datetime import datetime
from typing import Callable, Dict, Iterable, List, Optional

from pydantic import ValidationError

from config import Settings
from errors import InvalidInputError, NotFoundError
from notifications import ADMIN_CHANNEL, NotificationCenter
from schemas import (
    BulkProductPatch,
    Category,
    NotificationType,
    Product,
    ProductData,
    ProductPatch,
)

logger = logging.getLogger(__name__)


def merge_product(product: Product, patch: ProductPatch) -> Product:
    """Return a new product with every field set on ``patch`` copied over."""
    changes = patch.model_dump(exclude_unset=True, exclude={"id"})
    try:
        return Product.model_validate({**product.model_dump(), **changes, "id": product.id})
    except ValidationError as e:
        raise InvalidInputError(str(e)) from e


class InventoryLedger:
    def __init__(self, categories: Iterable[Category], notifier: NotificationCenter,
                 settings: Settings, clock: Callable[[], datetime] = datetime.now):
        self._categories: List[Category] = [c.model_copy() for c in categories]
        self._products: List[Product] = []
        self._notifier = notifier
        self._settings = settings
        self._clock = clock
        self._last_id = 0

    # -----------------------------
    # Reads
    # -----------------------------

    @property
    def products(self) -> List[Product]:
        return [p.model_copy(deep=True) for p in self._products]

    def get(self, product_id: str) -> Optional[Product]:
        for p in self._products:
            if p.id == product_id:
                return p.model_copy(deep=True)
        return None

    def require(self, product_id: str) -> Product:
        product = self.get(product_id)
        if product is None:
            raise NotFoundError("Product", product_id)
        return product

    def category_names(self) -> List[str]:
        return [c.name for c in self._categories]

    def categories(self) -> List[Category]:
        counts: Dict[str, int] = {}
        for p in self._products:
            counts[p.category] = counts.get(p.category, 0) + 1
        return [c.model_copy(update={"product_count": counts.get(c.name, 0)}) for c in self._categories]

    def low_stock_products(self) -> List[Product]:
        # Stock count only; the in_stock flag does not matter here
        threshold = self._settings.low_stock_threshold
        return [p.model_copy(deep=True) for p in self._products if p.stock <= threshold]

    def low_stock_alerts(self, products: Optional[Iterable[Product]] = None) -> List[Product]:
        """Products worth a warning: nearly sold out but still offered."""
        pool = self._products if products is None else products
        threshold = self._settings.low_stock_alert_threshold
        return [p.model_copy(deep=True) for p in pool if p.in_stock and p.stock <= threshold]

    # -----------------------------
    # Mutations
    # -----------------------------

    def _check_category(self, name: str) -> None:
        if name not in self.category_names():
            raise InvalidInputError(f"Unknown category: {name}")

    def _new_id(self) -> str:
        # Millisecond clock, bumped when two products land in the same tick
        stamp = int(self._clock().timestamp() * 1000)
        self._last_id = max(stamp, self._last_id + 1)
        return str(self._last_id)

    def load(self, products: Iterable[Product]) -> None:
        """Insert products that already carry an id (seeding)."""
        for p in products:
            self._check_category(p.category)
            if self.get(p.id) is not None:
                raise InvalidInputError(f"Duplicate product id: {p.id}")
            self._products.append(p.model_copy(deep=True))
            if p.id.isdigit():
                self._last_id = max(self._last_id, int(p.id))

    def add_product(self, data: ProductData) -> Product:
        self._check_category(data.category)
        product = Product(id=self._new_id(), **data.model_dump())
        self._products.append(product)
        logger.info("Product %s added (%s)", product.id, product.name)
        self._notifier.add_notification(
            ADMIN_CHANNEL,
            "Product Added",
            f"{product.name} has been added to inventory",
            NotificationType.success,
        )
        self._alert_low_stock([product])
        return product.model_copy(deep=True)

    def _apply(self, product_id: str, patch: ProductPatch) -> Optional[Product]:
        for index, current in enumerate(self._products):
            if current.id == product_id:
                updated = merge_product(current, patch)
                if updated.category != current.category:
                    self._check_category(updated.category)
                self._products[index] = updated
                return updated
        return None

    def update_product(self, product_id: str, patch: ProductPatch) -> Optional[Product]:
        """Merge ``patch`` onto the product; None when the id is unknown."""
        updated = self._apply(product_id, patch)
        if updated is None:
            logger.warning("Update skipped, no product %s", product_id)
            return None
        logger.info("Product %s updated: %s", product_id, sorted(patch.model_dump(exclude_unset=True)))
        self._alert_low_stock([updated])
        return updated.model_copy(deep=True)

    def delete_product(self, product_id: str) -> Optional[Product]:
        product = self.get(product_id)
        if product is None:
            logger.warning("Delete skipped, no product %s", product_id)
            return None
        self._products = [p for p in self._products if p.id != product_id]
        logger.info("Product %s deleted (%s)", product_id, product.name)
        self._notifier.add_notification(
            ADMIN_CHANNEL,
            "Product Deleted",
            f"{product.name} has been removed from inventory",
            NotificationType.info,
        )
        return product

    def bulk_update_products(self, rows: List[BulkProductPatch]) -> List[Product]:
        """Apply each row carrying an id; rows without one are ignored.

        Every row is merged and validated before anything is written, so one
        bad row leaves the catalog untouched.
        """
        staged: Dict[str, Product] = {}
        for row in rows:
            if not row.id:
                continue
            current = staged.get(row.id) or self.get(row.id)
            if current is None:
                continue
            merged = merge_product(current, row)
            self._check_category(merged.category)
            staged[row.id] = merged

        self._products = [staged.get(p.id, p) for p in self._products]
        updated = list(staged.values())
        logger.info("Bulk update: %d rows, %d products changed", len(rows), len(updated))
        self._notifier.add_notification(
            ADMIN_CHANNEL,
            "Bulk Update Complete",
            f"{len(rows)} products have been updated",
            NotificationType.success,
        )
        self._alert_low_stock(updated)
        return updated

    def _alert_low_stock(self, touched: List[Product]) -> None:
        for p in self.low_stock_alerts(touched):
            self._notifier.add_notification(
                ADMIN_CHANNEL,
                "Low Stock Alert",
                f"{p.name} is running low ({p.stock} items left)",
                NotificationType.warning,
            )
