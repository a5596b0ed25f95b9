"""Runtime settings, read from the environment."""

import os

from pydantic import BaseModel, Field


class Settings(BaseModel):
    tax_rate: float = Field(0.05, ge=0, description="Fraction added on top of the subtotal")
    low_stock_threshold: int = Field(10, ge=0)
    low_stock_alert_threshold: int = Field(5, ge=0)
    top_sellers_limit: int = Field(5, ge=1)
    recommendation_limit: int = Field(6, ge=1)
    recommendation_categories: int = Field(3, ge=1)
    suggestion_limit: int = Field(5, ge=1)
    seed_catalog: bool = True
    port: int = 8000


def _flag(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


def load_settings() -> Settings:
    return Settings(
        tax_rate=float(os.getenv("TAX_RATE", 0.05)),
        low_stock_threshold=int(os.getenv("LOW_STOCK_THRESHOLD", 10)),
        low_stock_alert_threshold=int(os.getenv("LOW_STOCK_ALERT_THRESHOLD", 5)),
        top_sellers_limit=int(os.getenv("TOP_SELLERS_LIMIT", 5)),
        recommendation_limit=int(os.getenv("RECOMMENDATION_LIMIT", 6)),
        recommendation_categories=int(os.getenv("RECOMMENDATION_CATEGORIES", 3)),
        suggestion_limit=int(os.getenv("SUGGESTION_LIMIT", 5)),
        seed_catalog=_flag(os.getenv("SEED_CATALOG", "true")),
        port=int(os.getenv("PORT", 8000)),
    )
