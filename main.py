import logging
import os
from typing import List, Optional

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from errors import EmptyCartError, InvalidInputError, InvalidTransitionError, NotFoundError, StoreError
from schemas import (
    Actor,
    AnalyticsSnapshot,
    BulkProductPatch,
    CartItem,
    Category,
    FilterCriteria,
    FilterPatch,
    Notification,
    Order,
    OrderProgress,
    OrderStatus,
    PaymentMethod,
    PickupSlot,
    Product,
    ProductData,
    ProductPatch,
    StatusUpdate,
    WishlistItem,
)
from store import Store

logger = logging.getLogger(__name__)

ERROR_STATUS = {
    NotFoundError: 404,
    InvalidInputError: 400,
    EmptyCartError: 400,
    InvalidTransitionError: 409,
}


# Request bodies

class AddToCartRequest(BaseModel):
    product_id: str
    quantity: int = Field(1, ge=1)


class QuantityUpdate(BaseModel):
    quantity: int = Field(..., description="Zero or less removes the line")


class WishlistRequest(BaseModel):
    product_id: str


class CheckoutRequest(BaseModel):
    customer_name: str = Field(..., min_length=1)
    selected_time_slot: PickupSlot = PickupSlot.thirty_minutes
    payment_method: PaymentMethod = PaymentMethod.cash
    notes: Optional[str] = None


class CartView(BaseModel):
    items: List[CartItem]
    total_items: int
    total_price: float


# Utilities

def get_store(request: Request) -> Store:
    return request.app.state.store


def found(value, kind: str, identifier: str):
    if value is None:
        raise HTTPException(status_code=404, detail=f"{kind} not found: {identifier}")
    return value


def cart_view(store: Store, customer_id: str) -> CartView:
    cart = store.peek_cart(customer_id)
    return CartView(items=cart.items, total_items=cart.get_total_items(), total_price=cart.get_total_price())


def create_app(store: Optional[Store] = None) -> FastAPI:
    app = FastAPI(title="Grocery Storefront API", version="1.0.0")
    app.state.store = store or Store()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError):
        status_code = ERROR_STATUS.get(type(exc), 400)
        logger.warning("%s %s -> %d: %s", request.method, request.url.path, status_code, exc)
        return JSONResponse(status_code=status_code, content={"detail": str(exc)})

    @app.get("/")
    def root():
        return {"message": "Grocery Storefront API running"}

    # Catalog

    @app.get("/categories", response_model=List[Category])
    def list_categories(store: Store = Depends(get_store)):
        return store.categories

    @app.get("/products", response_model=List[Product])
    def list_products(category: Optional[str] = None, store: Store = Depends(get_store)):
        if category:
            return store.get_products_by_category(category)
        return store.products

    @app.post("/products", response_model=Product, status_code=201)
    def create_product(payload: ProductData, store: Store = Depends(get_store)):
        return store.add_product(payload)

    @app.post("/products/bulk", response_model=List[Product])
    def bulk_update(rows: List[BulkProductPatch], store: Store = Depends(get_store)):
        return store.bulk_update_products(rows)

    @app.get("/products/low-stock", response_model=List[Product])
    def low_stock(store: Store = Depends(get_store)):
        return store.low_stock_products()

    @app.get("/products/search", response_model=List[Product])
    def search(q: str = "", store: Store = Depends(get_store)):
        return store.search_products(q)

    @app.get("/products/suggestions", response_model=List[str])
    def suggestions(q: str = "", store: Store = Depends(get_store)):
        return store.search_suggestions(q)

    @app.get("/products/{product_id}", response_model=Product)
    def get_product(product_id: str, store: Store = Depends(get_store)):
        return found(store.get_product(product_id), "Product", product_id)

    @app.patch("/products/{product_id}", response_model=Product)
    def update_product(product_id: str, patch: ProductPatch, store: Store = Depends(get_store)):
        return found(store.update_product(product_id, patch), "Product", product_id)

    @app.delete("/products/{product_id}", response_model=Product)
    def delete_product(product_id: str, store: Store = Depends(get_store)):
        return found(store.delete_product(product_id), "Product", product_id)

    # Browsing

    @app.get("/filters", response_model=FilterCriteria)
    def get_filters(store: Store = Depends(get_store)):
        return store.filters

    @app.patch("/filters", response_model=FilterCriteria)
    def update_filters(patch: FilterPatch, store: Store = Depends(get_store)):
        return store.update_filters(patch)

    @app.get("/catalog", response_model=List[Product])
    def catalog(q: str = "", store: Store = Depends(get_store)):
        return store.get_filtered_products(q)

    # Cart & wishlist

    @app.get("/customers/{customer_id}/cart", response_model=CartView)
    def get_cart(customer_id: str, store: Store = Depends(get_store)):
        return cart_view(store, customer_id)

    @app.post("/customers/{customer_id}/cart", response_model=CartView)
    def add_to_cart(customer_id: str, payload: AddToCartRequest, store: Store = Depends(get_store)):
        store.add_to_cart(customer_id, payload.product_id, payload.quantity)
        return cart_view(store, customer_id)

    @app.patch("/customers/{customer_id}/cart/{product_id}", response_model=CartView)
    def update_quantity(customer_id: str, product_id: str, payload: QuantityUpdate,
                        store: Store = Depends(get_store)):
        store.peek_cart(customer_id).update_quantity(product_id, payload.quantity)
        return cart_view(store, customer_id)

    @app.delete("/customers/{customer_id}/cart/{product_id}", response_model=CartView)
    def remove_from_cart(customer_id: str, product_id: str, store: Store = Depends(get_store)):
        store.peek_cart(customer_id).remove_from_cart(product_id)
        return cart_view(store, customer_id)

    @app.delete("/customers/{customer_id}/cart", response_model=CartView)
    def clear_cart(customer_id: str, store: Store = Depends(get_store)):
        store.peek_cart(customer_id).clear_cart()
        return cart_view(store, customer_id)

    @app.get("/customers/{customer_id}/wishlist", response_model=List[WishlistItem])
    def get_wishlist(customer_id: str, store: Store = Depends(get_store)):
        return store.peek_wishlist(customer_id).items

    @app.post("/customers/{customer_id}/wishlist", response_model=List[WishlistItem])
    def add_to_wishlist(customer_id: str, payload: WishlistRequest, store: Store = Depends(get_store)):
        store.add_to_wishlist(customer_id, payload.product_id)
        return store.wishlist_for(customer_id).items

    @app.delete("/customers/{customer_id}/wishlist/{product_id}", response_model=List[WishlistItem])
    def remove_from_wishlist(customer_id: str, product_id: str, store: Store = Depends(get_store)):
        store.peek_wishlist(customer_id).remove_from_wishlist(product_id)
        return store.peek_wishlist(customer_id).items

    # Orders

    @app.post("/customers/{customer_id}/checkout", response_model=Order, status_code=201)
    def checkout(customer_id: str, payload: CheckoutRequest, store: Store = Depends(get_store)):
        actor = Actor(id=customer_id, name=payload.customer_name)
        return store.checkout(actor, payload.selected_time_slot, payload.payment_method, payload.notes)

    @app.get("/customers/{customer_id}/orders", response_model=List[Order])
    def customer_orders(customer_id: str, store: Store = Depends(get_store)):
        return store.get_orders_for_customer(customer_id)

    @app.get("/customers/{customer_id}/recommendations", response_model=List[Product])
    def recommendations(customer_id: str, store: Store = Depends(get_store)):
        return store.get_recommended_products(customer_id)

    @app.get("/orders", response_model=List[Order])
    def list_orders(status: Optional[OrderStatus] = None, store: Store = Depends(get_store)):
        if status is not None:
            return store.get_orders_by_status(status)
        return store.orders

    @app.get("/orders/{order_id}", response_model=Order)
    def get_order(order_id: str, store: Store = Depends(get_store)):
        return found(store.get_order(order_id), "Order", order_id)

    @app.get("/orders/{order_id}/progress", response_model=OrderProgress)
    def order_progress(order_id: str, store: Store = Depends(get_store)):
        return store.order_progress(order_id)

    @app.patch("/orders/{order_id}/status", response_model=Order)
    def update_order_status(order_id: str, payload: StatusUpdate, store: Store = Depends(get_store)):
        return found(store.update_order_status(order_id, payload.status), "Order", order_id)

    # Admin console

    @app.get("/analytics", response_model=AnalyticsSnapshot)
    def analytics(store: Store = Depends(get_store)):
        return store.analytics

    @app.get("/notifications/{user_id}", response_model=List[Notification])
    def notifications(user_id: str, store: Store = Depends(get_store)):
        return store.notifications.for_user(user_id)

    @app.post("/notifications/{user_id}/read")
    def mark_all_read(user_id: str, store: Store = Depends(get_store)):
        return {"marked": store.notifications.mark_all_read(user_id)}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO"))
    uvicorn.run(app, host="0.0.0.0", port=app.state.store.settings.port)
