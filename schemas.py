"""
Schemas for the Grocery Storefront

Each Pydantic model describes one kind of record held by the in-memory store.
Closed choices (order status, sort key, pickup slot...) are str enums so that
unknown labels are rejected at validation time.
"""

from datetime import datetime, timedelta
from enum import Enum
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator


class OrderStatus(str, Enum):
    pending = "pending"
    preparing = "preparing"
    ready = "ready"
    completed = "completed"
    cancelled = "cancelled"

    @property
    def is_terminal(self) -> bool:
        return self in (OrderStatus.completed, OrderStatus.cancelled)


# Forward-only sequence; cancelled is a side branch
STATUS_SEQUENCE: List[OrderStatus] = [
    OrderStatus.pending,
    OrderStatus.preparing,
    OrderStatus.ready,
    OrderStatus.completed,
]


class PaymentMethod(str, Enum):
    cash = "cash"
    card = "card"
    upi = "upi"


class PickupSlot(str, Enum):
    """Pickup offsets a customer can pick at checkout"""
    thirty_minutes = "30 minutes"
    one_hour = "1 hour"
    ninety_minutes = "1.5 hours"
    two_hours = "2 hours"

    @property
    def offset(self) -> timedelta:
        return _SLOT_OFFSETS[self]


_SLOT_OFFSETS: Dict[PickupSlot, timedelta] = {
    PickupSlot.thirty_minutes: timedelta(minutes=30),
    PickupSlot.one_hour: timedelta(minutes=60),
    PickupSlot.ninety_minutes: timedelta(minutes=90),
    PickupSlot.two_hours: timedelta(minutes=120),
}


class Availability(str, Enum):
    all = "all"
    in_stock = "inStock"
    out_of_stock = "outOfStock"


class SortKey(str, Enum):
    name = "name"
    price_low = "price-low"
    price_high = "price-high"
    rating = "rating"
    newest = "newest"


class NotificationType(str, Enum):
    info = "info"
    success = "success"
    warning = "warning"
    error = "error"


class Role(str, Enum):
    customer = "customer"
    admin = "admin"


# -----------------------------
# Catalog
# -----------------------------

class NutritionInfo(BaseModel):
    calories: float = Field(0, ge=0)
    protein: float = Field(0, ge=0)
    carbs: float = Field(0, ge=0)
    fat: float = Field(0, ge=0)


class ProductData(BaseModel):
    """Fields supplied when creating a product (everything but the id)"""
    name: str = Field(..., min_length=1, description="Product name")
    description: str = Field("", description="Detailed description")
    price: float = Field(..., ge=0, description="Unit price")
    category: str = Field(..., description="Name of a known category")
    brand: str = Field("", description="Brand label")
    image: Optional[str] = Field(None, description="Image URL")
    stock: int = Field(0, ge=0, description="Available stock units")
    in_stock: bool = Field(True, description="Explicit availability override")
    rating: float = Field(0, ge=0, le=5, description="Average rating 0-5")
    reviews: int = Field(0, ge=0)
    tags: List[str] = Field(default_factory=list, description="Searchable tags")
    nutrition_info: Optional[NutritionInfo] = None


class Product(ProductData):
    id: str


class ProductPatch(BaseModel):
    """Partial product update; only the fields that are set get merged"""
    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    price: Optional[float] = Field(None, ge=0)
    category: Optional[str] = None
    brand: Optional[str] = None
    image: Optional[str] = None
    stock: Optional[int] = Field(None, ge=0)
    in_stock: Optional[bool] = None
    rating: Optional[float] = Field(None, ge=0, le=5)
    reviews: Optional[int] = Field(None, ge=0)
    tags: Optional[List[str]] = None
    nutrition_info: Optional[NutritionInfo] = None


class BulkProductPatch(ProductPatch):
    """Bulk upload row; rows without an id are skipped"""
    id: Optional[str] = None


class Category(BaseModel):
    id: str
    name: str
    icon: str = ""
    product_count: int = Field(0, ge=0, description="Derived from the catalog")


# -----------------------------
# Cart & wishlist
# -----------------------------

class CartItem(BaseModel):
    product: Product = Field(..., description="Snapshot taken when the item was added")
    quantity: int = Field(..., ge=1)

    @property
    def line_total(self) -> float:
        return self.product.price * self.quantity


class WishlistItem(BaseModel):
    product: Product
    added_at: datetime


# -----------------------------
# Orders
# -----------------------------

class Actor(BaseModel):
    """Identity handed over by the identity provider, trusted as-is"""
    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    role: Role = Role.customer


class OrderDraft(BaseModel):
    """Everything needed to place an order, before id/total/pickup time exist"""
    customer_id: str = Field(..., min_length=1)
    customer_name: str = Field(..., min_length=1)
    items: List[CartItem]
    selected_time_slot: PickupSlot = PickupSlot.thirty_minutes
    payment_method: PaymentMethod = PaymentMethod.cash
    notes: Optional[str] = None


class Order(BaseModel):
    id: str
    customer_id: str
    customer_name: str
    items: List[CartItem] = Field(..., min_length=1)
    total: float = Field(..., ge=0, description="Subtotal plus tax, fixed at creation")
    status: OrderStatus = OrderStatus.pending
    timestamp: datetime
    pickup_time: datetime
    selected_time_slot: PickupSlot
    payment_method: PaymentMethod
    notes: Optional[str] = None

    @property
    def subtotal(self) -> float:
        return sum(item.line_total for item in self.items)


class OrderProgress(BaseModel):
    order_id: str
    status: OrderStatus
    step: int = Field(..., description="Index in the pending..completed sequence, -1 when cancelled")
    label: str


class StatusUpdate(BaseModel):
    status: OrderStatus


# -----------------------------
# Browsing
# -----------------------------

class FilterCriteria(BaseModel):
    brands: List[str] = Field(default_factory=list, description="Empty means all brands")
    price_range: Tuple[float, float] = (0, 1000)
    availability: Availability = Availability.all
    rating: float = Field(0, ge=0, le=5, description="Minimum rating, 0 disables")
    sort_by: SortKey = SortKey.name

    @field_validator("price_range")
    @classmethod
    def check_price_range(cls, v):
        low, high = v
        if low < 0 or high < low:
            raise ValueError("price range must satisfy 0 <= min <= max")
        return v


class FilterPatch(BaseModel):
    brands: Optional[List[str]] = None
    price_range: Optional[Tuple[float, float]] = None
    availability: Optional[Availability] = None
    rating: Optional[float] = Field(None, ge=0, le=5)
    sort_by: Optional[SortKey] = None


# -----------------------------
# Analytics
# -----------------------------

class ProductSales(BaseModel):
    product: Product
    quantity: int
    revenue: float


class OrderTrend(BaseModel):
    date: str
    orders: int
    revenue: float


class CategoryPerformance(BaseModel):
    category: str
    sales: int
    revenue: float


class AnalyticsSnapshot(BaseModel):
    total_revenue: float = 0
    total_orders: int = 0
    total_customers: int = 0
    average_order_value: float = 0
    top_selling_products: List[ProductSales] = Field(default_factory=list)
    order_trends: List[OrderTrend] = Field(default_factory=list)
    category_performance: List[CategoryPerformance] = Field(default_factory=list)


# -----------------------------
# Notifications
# -----------------------------

class Notification(BaseModel):
    id: str
    user_id: str = Field(..., description="'admin' is the store operator channel")
    title: str = Field(..., min_length=1)
    message: str
    type: NotificationType = NotificationType.info
    read: bool = False
    timestamp: datetime
