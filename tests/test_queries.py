import pytest

import queries
from schemas import (
    Availability,
    CartItem,
    FilterCriteria,
    FilterPatch,
    OrderDraft,
    ProductPatch,
    SortKey,
)


def place(store, customer, *lines):
    items = [CartItem(product=store.get_product(pid), quantity=qty) for pid, qty in lines]
    return store.add_order(OrderDraft(customer_id=customer, customer_name=customer.title(), items=items))


def ids(products):
    return [p.id for p in products]


def test_search_is_case_insensitive_across_fields(store):
    assert set(ids(store.search_products("DAIRY"))) == {"6", "7", "8", "9"}
    assert set(ids(store.search_products("omega-3"))) == {"7", "10"}
    assert ids(store.search_products("italiano")) == ["24"]


def test_empty_search_matches_nothing(store):
    assert store.search_products("") == []


def test_suggestions_follow_query(store):
    store.set_search_query("fresh")
    suggestions = store.search_suggestions()
    assert len(suggestions) == 5
    assert suggestions[0] == "Fresh Bananas"

    store.set_search_query("")
    assert store.search_suggestions() == []


def test_price_range_is_inclusive(store):
    store.update_filters(FilterPatch(price_range=(0, 89)))
    result = store.get_filtered_products()
    assert result
    assert all(p.price <= 89 for p in result)
    assert "1" in ids(result)


def test_availability_filter(store):
    store.update_product("3", ProductPatch(in_stock=False))

    store.update_filters(FilterPatch(availability=Availability.in_stock))
    assert all(p.in_stock for p in store.get_filtered_products())
    assert "3" not in ids(store.get_filtered_products())

    store.update_filters(FilterPatch(availability=Availability.out_of_stock))
    assert ids(store.get_filtered_products()) == ["3"]


def test_price_low_sort_is_non_decreasing(store):
    store.update_filters(FilterPatch(sort_by=SortKey.price_low))
    prices = [p.price for p in store.get_filtered_products()]
    assert prices == sorted(prices)
    assert len(prices) == 30


def test_price_high_and_rating_sorts(store):
    store.update_filters(FilterPatch(sort_by=SortKey.price_high))
    prices = [p.price for p in store.get_filtered_products()]
    assert prices == sorted(prices, reverse=True)

    store.update_filters(FilterPatch(sort_by=SortKey.rating))
    ratings = [p.rating for p in store.get_filtered_products()]
    assert ratings == sorted(ratings, reverse=True)


def test_default_sort_is_by_name(store):
    names = [p.name for p in store.get_filtered_products()]
    assert names[0] == "Artisan Bread"
    assert names == sorted(names, key=str.casefold)


def test_newest_sort_puts_added_products_first(store, product_data):
    added = store.add_product(product_data())
    store.update_filters(FilterPatch(sort_by=SortKey.newest))
    assert ids(store.get_filtered_products())[:3] == [added.id, "30", "29"]


def test_brand_and_rating_filters(store):
    store.update_filters(FilterPatch(brands=["Italiano", "Ocean Fresh"]))
    assert ids(store.get_filtered_products()) == ["10", "24"]

    store.reset_filters()
    store.update_filters(FilterPatch(rating=4.8))
    assert set(ids(store.get_filtered_products())) == {"6", "10", "14", "20", "22"}


def test_search_narrows_before_filters(store):
    store.set_search_query("bread")
    store.update_filters(FilterPatch(price_range=(0, 70)))
    assert ids(store.get_filtered_products()) == ["15"]


def test_filter_pipeline_is_pure(store):
    products = store.products
    criteria = FilterCriteria(sort_by=SortKey.price_high, brands=["Fresh Farm"])
    queries.filter_products(products, criteria)
    assert ids(products) == ids(store.products)


def test_brands_and_max_price(store):
    brands = store.available_brands()
    assert brands == sorted(brands)
    assert "Tea Garden" in brands
    assert store.max_price() == 650


def test_no_recommendations_without_history(store):
    assert store.get_recommended_products("ghost") == []


def test_recommendations_by_favourite_categories(store):
    place(store, "bob", ("1", 1), ("5", 2), ("6", 1))
    place(store, "carol", ("10", 1))

    assert ids(store.get_recommended_products("bob")) == ["6", "2", "7", "5", "8", "1"]


def test_recommendations_take_top_three_categories(store):
    place(store, "bob", ("29", 1), ("30", 1), ("19", 1), ("22", 1), ("27", 1))

    result = store.get_recommended_products("bob")
    assert len(result) == 6
    assert {p.category for p in result} <= {"Household", "Snacks", "Pantry"}
    ratings = [p.rating for p in result]
    assert ratings == sorted(ratings, reverse=True)


def test_analytics_snapshot(store, clock):
    place(store, "alice", ("1", 2))
    clock.advance(days=1)
    place(store, "bob", ("6", 1), ("1", 1))

    snapshot = store.analytics
    assert snapshot.total_orders == 2
    assert snapshot.total_customers == 2
    assert snapshot.total_revenue == pytest.approx(186.9 + 172.2)
    assert snapshot.average_order_value == pytest.approx((186.9 + 172.2) / 2)

    top = snapshot.top_selling_products
    assert [(s.product.id, s.quantity) for s in top] == [("1", 3), ("6", 1)]
    assert top[0].revenue == pytest.approx(267)

    performance = [(c.category, c.sales, c.revenue) for c in snapshot.category_performance]
    assert performance == [("Fruits & Vegetables", 3, 267), ("Dairy & Eggs", 1, 75)]

    assert [(t.date, t.orders) for t in snapshot.order_trends] == [("2026-10-19", 1), ("2026-10-20", 1)]


def test_analytics_is_idempotent(store):
    place(store, "alice", ("1", 2))
    assert store.update_analytics() == store.update_analytics()


def test_empty_analytics(store):
    snapshot = store.update_analytics()
    assert snapshot.total_revenue == 0
    assert snapshot.average_order_value == 0
    assert snapshot.category_performance == []
