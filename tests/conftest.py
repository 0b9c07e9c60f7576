"""
Shared test fixtures.

The pricing engine gets a fixed clock and a seeded RNG so estimation ids
are reproducible, and notifications go to an in-memory channel instead
of SMTP / Telegram.
"""

import random
from datetime import datetime, timezone
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from happyride.domain.entities import BookingRequest
from happyride.domain.enums import TripType
from happyride.domain.pricing import PricingEngine
from happyride.notifications.base import BookingNotice, NotificationChannel
from happyride.notifications.dispatcher import NotificationDispatcher

FIXED_NOW = datetime(2025, 1, 1, 10, 0, tzinfo=timezone.utc)

VALID_BODY = {
    "pickupLocation": "Chennai",
    "dropLocation": "Bangalore",
    "tripType": "one-way",
    "date": "2025-01-01",
    "time": "10:00",
    "carType": "suv",
    "name": "Test User",
    "phone": "9876543210",
    "distance": 350,
}


def make_engine(seed: int = 42) -> PricingEngine:
    return PricingEngine(
        driver_allowance=400,
        fallback_distance_km=150.0,
        clock=lambda: FIXED_NOW,
        rng=random.Random(seed),
    )


def make_booking(**overrides) -> BookingRequest:
    fields = dict(
        pickup_location="Chennai",
        drop_location="Bangalore",
        trip_type=TripType.ONE_WAY,
        date="2025-01-01",
        time="10:00",
        car_type="suv",
        name="Test User",
        phone="9876543210",
        distance=350,
    )
    fields.update(overrides)
    return BookingRequest(**fields)


class RecordingChannel(NotificationChannel):
    name = "recording"

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.notices: list[BookingNotice] = []

    async def send(self, notice: BookingNotice) -> None:
        self.notices.append(notice)
        if self.fail:
            raise ConnectionError("channel down")


# ── Fixtures ──────────────────────────────────────────────────────────


@pytest.fixture
def engine() -> PricingEngine:
    return make_engine()


@pytest.fixture
def channel() -> RecordingChannel:
    return RecordingChannel()


@pytest.fixture
def dispatcher(channel: RecordingChannel) -> NotificationDispatcher:
    return NotificationDispatcher([channel])


@pytest.fixture
def app(dispatcher: NotificationDispatcher):
    """Fresh app with deterministic pricing and in-memory notifications."""
    from happyride.api.app import create_app
    from happyride.api.dependencies import get_dispatcher, get_pricing_engine
    from happyride.api.middleware import limiter

    limiter.reset()
    app = create_app()
    app.dependency_overrides[get_pricing_engine] = lambda: make_engine()
    app.dependency_overrides[get_dispatcher] = lambda: dispatcher
    return app


@pytest_asyncio.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
