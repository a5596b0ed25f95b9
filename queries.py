"""
Read-only derivations over the catalog and the order history.

Nothing in here mutates its inputs or caches results; every call recomputes
from the collections it is given.
"""

from collections import Counter
from typing import Dict, Iterable, List, Sequence

from schemas import (
    AnalyticsSnapshot,
    Availability,
    CategoryPerformance,
    FilterCriteria,
    Order,
    OrderTrend,
    Product,
    ProductSales,
    SortKey,
)


def _matches(product: Product, needle: str) -> bool:
    fields = (product.name, product.description, product.category, product.brand)
    if any(needle in f.lower() for f in fields):
        return True
    return any(needle in tag.lower() for tag in product.tags)


def search_products(products: Iterable[Product], query: str) -> List[Product]:
    """Case-insensitive substring match on name, description, category, brand and tags.

    An empty query matches nothing; callers that want "everything" skip the search.
    """
    if not query:
        return []
    needle = query.lower()
    return [p for p in products if _matches(p, needle)]


def search_suggestions(products: Iterable[Product], query: str, limit: int = 5) -> List[str]:
    if not query:
        return []
    needle = query.lower()
    names = []
    for p in products:
        if needle in p.name.lower() or needle in p.brand.lower() or any(needle in t.lower() for t in p.tags):
            names.append(p.name)
            if len(names) == limit:
                break
    return names


def products_by_category(products: Iterable[Product], category: str) -> List[Product]:
    return [p for p in products if p.category == category]


def available_brands(products: Iterable[Product]) -> List[str]:
    return sorted({p.brand for p in products if p.brand})


def max_price(products: Iterable[Product]) -> float:
    return max((p.price for p in products), default=0)


def _id_number(product: Product) -> int:
    # Ids are millisecond stamps (or small seed numbers); anything else sorts last
    return int(product.id) if product.id.isdigit() else -1


def sort_products(products: List[Product], sort_by: SortKey) -> List[Product]:
    if sort_by == SortKey.price_low:
        return sorted(products, key=lambda p: p.price)
    if sort_by == SortKey.price_high:
        return sorted(products, key=lambda p: p.price, reverse=True)
    if sort_by == SortKey.rating:
        return sorted(products, key=lambda p: p.rating, reverse=True)
    if sort_by == SortKey.newest:
        return sorted(products, key=_id_number, reverse=True)
    return sorted(products, key=lambda p: p.name.casefold())


def filter_products(products: Sequence[Product], criteria: FilterCriteria, query: str = "") -> List[Product]:
    """Search, then brand, price, availability and rating filters, then sort."""
    result = search_products(products, query) if query else list(products)

    if criteria.brands:
        brands = set(criteria.brands)
        result = [p for p in result if p.brand in brands]

    low, high = criteria.price_range
    result = [p for p in result if low <= p.price <= high]

    if criteria.availability == Availability.in_stock:
        result = [p for p in result if p.in_stock]
    elif criteria.availability == Availability.out_of_stock:
        result = [p for p in result if not p.in_stock]

    if criteria.rating > 0:
        result = [p for p in result if p.rating >= criteria.rating]

    return sort_products(result, criteria.sort_by)


def recommended_products(products: Iterable[Product], orders: Iterable[Order], customer_id: str,
                         top_categories: int = 3, limit: int = 6) -> List[Product]:
    """Best rated products from the categories this customer buys from most."""
    purchases = Counter(
        item.product.category
        for order in orders if order.customer_id == customer_id
        for item in order.items
    )
    if not purchases:
        return []
    # most_common keeps first-seen order among equal counts
    favourites = {category for category, _ in purchases.most_common(top_categories)}
    picks = [p for p in products if p.category in favourites]
    return sorted(picks, key=lambda p: p.rating, reverse=True)[:limit]


def compute_analytics(orders: Sequence[Order], category_names: Iterable[str],
                      top_sellers: int = 5) -> AnalyticsSnapshot:
    total_revenue = sum(o.total for o in orders)
    total_orders = len(orders)

    sales: Dict[str, ProductSales] = {}
    for order in orders:
        for item in order.items:
            entry = sales.get(item.product.id)
            if entry is None:
                entry = sales[item.product.id] = ProductSales(product=item.product, quantity=0, revenue=0)
            entry.quantity += item.quantity
            entry.revenue += item.line_total
    top = sorted(sales.values(), key=lambda s: s.quantity, reverse=True)[:top_sellers]

    trends: Dict[str, OrderTrend] = {}
    for order in sorted(orders, key=lambda o: o.timestamp):
        day = order.timestamp.date().isoformat()
        trend = trends.setdefault(day, OrderTrend(date=day, orders=0, revenue=0))
        trend.orders += 1
        trend.revenue += order.total

    performance = []
    for name in category_names:
        lines = [i for o in orders for i in o.items if i.product.category == name]
        quantity = sum(i.quantity for i in lines)
        if quantity > 0:
            performance.append(CategoryPerformance(
                category=name,
                sales=quantity,
                revenue=sum(i.line_total for i in lines),
            ))

    return AnalyticsSnapshot(
        total_revenue=total_revenue,
        total_orders=total_orders,
        total_customers=len({o.customer_id for o in orders}),
        average_order_value=total_revenue / total_orders if total_orders else 0,
        top_selling_products=top,
        order_trends=list(trends.values()),
        category_performance=performance,
    )
