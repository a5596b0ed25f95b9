from datetime import datetime, timedelta

import pytest

from config import Settings
from schemas import Actor, ProductData
from store import Store


class FakeClock:
    def __init__(self, start=datetime(2026, 10, 19, 9, 0, 0)):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, **kwargs):
        self.now += timedelta(**kwargs)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def store(settings, clock):
    return Store(settings=settings, clock=clock)


@pytest.fixture
def empty_store(settings, clock):
    return Store(settings=settings, products=[], clock=clock)


@pytest.fixture
def alice():
    return Actor(id="cust-1", name="Alice")


def make_product_data(**overrides):
    data = {
        "name": "Test Honey",
        "description": "Raw forest honey",
        "price": 210,
        "category": "Pantry",
        "brand": "Bee Happy",
        "stock": 40,
        "rating": 4.1,
        "reviews": 12,
        "tags": ["raw", "sweet"],
    }
    data.update(overrides)
    return ProductData(**data)


@pytest.fixture
def product_data():
    return make_product_data
