"""FastAPI dependency injection helpers."""

from functools import lru_cache

from happyride.config import settings
from happyride.domain.pricing import PricingEngine
from happyride.notifications.dispatcher import NotificationDispatcher, build_dispatcher


@lru_cache
def get_pricing_engine() -> PricingEngine:
    return PricingEngine(
        driver_allowance=settings.driver_allowance,
        fallback_distance_km=settings.fallback_distance_km,
    )


@lru_cache
def get_dispatcher() -> NotificationDispatcher:
    return build_dispatcher(settings)
