import pytest
from fastapi.testclient import TestClient

from main import create_app


@pytest.fixture
def client(store):
    return TestClient(create_app(store))


def test_root(client):
    assert client.get("/").json() == {"message": "Grocery Storefront API running"}


def test_product_crud(client):
    payload = {"name": "Oat Milk", "price": 140, "category": "Dairy & Eggs", "brand": "Oatly", "stock": 8}
    created = client.post("/products", json=payload)
    assert created.status_code == 201
    product_id = created.json()["id"]

    patched = client.patch(f"/products/{product_id}", json={"price": 150})
    assert patched.json()["price"] == 150
    assert patched.json()["brand"] == "Oatly"

    low = [p["id"] for p in client.get("/products/low-stock").json()]
    assert product_id in low

    dairy = [c for c in client.get("/categories").json() if c["name"] == "Dairy & Eggs"][0]
    assert dairy["product_count"] == 5

    assert client.delete(f"/products/{product_id}").status_code == 200
    assert client.get(f"/products/{product_id}").status_code == 404
    assert client.delete(f"/products/{product_id}").status_code == 404


def test_invalid_product_payloads(client):
    assert client.post("/products", json={"name": "X", "price": -5, "category": "Bakery"}).status_code == 422
    assert client.post("/products", json={"name": "X", "price": 5, "category": "Toys"}).status_code == 400


def test_bulk_update(client):
    response = client.post("/products/bulk", json=[{"id": "1", "stock": 99}, {"price": 3}])
    assert [p["id"] for p in response.json()] == ["1"]
    assert client.get("/products/1").json()["stock"] == 99


def test_catalog_filters(client):
    client.patch("/filters", json={"sort_by": "price-low", "price_range": [0, 60]})
    prices = [p["price"] for p in client.get("/catalog").json()]
    assert prices == sorted(prices)
    assert max(prices) <= 60

    assert client.patch("/filters", json={"sort_by": "cheapest"}).status_code == 422
    assert client.get("/filters").json()["sort_by"] == "price-low"


def test_search_and_suggestions(client):
    assert {p["id"] for p in client.get("/products/search", params={"q": "omega-3"}).json()} == {"7", "10"}
    assert client.get("/products/suggestions", params={"q": "tea"}).json() == ["Green Tea"]


def test_cart_checkout_and_status_flow(client):
    cart = client.post("/customers/c1/cart", json={"product_id": "1", "quantity": 2}).json()
    assert cart["total_items"] == 2
    assert cart["total_price"] == 178

    response = client.post("/customers/c1/checkout", json={
        "customer_name": "Alice",
        "selected_time_slot": "1.5 hours",
        "payment_method": "upi",
    })
    assert response.status_code == 201
    order = response.json()
    assert order["status"] == "pending"
    assert order["total"] == pytest.approx(186.9)
    assert client.get("/customers/c1/cart").json()["items"] == []

    for status in ("preparing", "ready", "completed"):
        updated = client.patch(f"/orders/{order['id']}/status", json={"status": status})
        assert updated.json()["status"] == status

    completed = client.get("/orders", params={"status": "completed"}).json()
    assert [o["id"] for o in completed] == [order["id"]]
    assert client.get(f"/orders/{order['id']}/progress").json()["label"] == "Order Completed"

    regress = client.patch(f"/orders/{order['id']}/status", json={"status": "pending"})
    assert regress.status_code == 409

    analytics = client.get("/analytics").json()
    assert analytics["total_orders"] == 1
    assert analytics["top_selling_products"][0]["quantity"] == 2

    messages = [n["title"] for n in client.get("/notifications/c1").json()]
    assert messages[-1] == "Order Confirmed"


def test_checkout_errors(client):
    empty = client.post("/customers/c2/checkout", json={"customer_name": "Bob"})
    assert empty.status_code == 400

    client.post("/customers/c2/cart", json={"product_id": "1"})
    bad_slot = client.post("/customers/c2/checkout", json={"customer_name": "Bob", "selected_time_slot": "3 hours"})
    assert bad_slot.status_code == 422

    assert client.post("/customers/c2/cart", json={"product_id": "404"}).status_code == 404
    assert client.patch("/orders/ORDER-1/status", json={"status": "ready"}).status_code == 404


def test_cart_quantity_and_removal(client):
    client.post("/customers/c3/cart", json={"product_id": "6", "quantity": 3})
    client.post("/customers/c3/cart", json={"product_id": "7"})

    cart = client.patch("/customers/c3/cart/6", json={"quantity": 0}).json()
    assert [i["product"]["id"] for i in cart["items"]] == ["7"]

    cart = client.delete("/customers/c3/cart/7").json()
    assert cart["total_items"] == 0


def test_wishlist(client):
    client.post("/customers/c4/wishlist", json={"product_id": "20"})
    items = client.post("/customers/c4/wishlist", json={"product_id": "20"}).json()
    assert len(items) == 1

    assert client.delete("/customers/c4/wishlist/20").json() == []


def test_recommendations(client):
    assert client.get("/customers/nobody/recommendations").json() == []


def test_catalog_query_leaves_session_search_alone(client, store):
    store.set_search_query("bread")

    assert client.get("/catalog", params={"q": "tea"}).json()
    assert client.get("/products/suggestions", params={"q": "milk"}).json()
    assert store.search_query == "bread"
    assert [p.id for p in store.get_filtered_products()] == [p.id for p in store.get_filtered_products("bread")]


def test_catalog_query_does_not_carry_over_between_requests(client):
    teas = {p["id"] for p in client.get("/catalog", params={"q": "tea"}).json()}
    everything = client.get("/catalog").json()
    assert len(everything) == 30
    assert teas < {p["id"] for p in everything}


def test_reading_unknown_customer_creates_nothing(client, store):
    assert client.get("/customers/ghost/cart").json() == {"items": [], "total_items": 0, "total_price": 0}
    assert client.get("/customers/ghost/wishlist").json() == []
    client.delete("/customers/ghost/cart")
    client.delete("/customers/ghost/cart/1")
    client.patch("/customers/ghost/cart/1", json={"quantity": 2})
    client.delete("/customers/ghost/wishlist/1")

    assert not store.has_cart("ghost")
    assert not store.has_wishlist("ghost")
