"""
Domain entities for a single booking / estimate request.

Nothing here outlives the request that created it: a ``BookingRequest``
goes in, a ``PricingResult`` comes out, and both are discarded once the
response and notifications have been produced.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .enums import CarType, TripType


# ── Value Objects ─────────────────────────────────────────────────────


@dataclass(frozen=True)
class Location:
    latitude: float
    longitude: float


@dataclass(frozen=True)
class FieldError:
    """One failed validation rule, reported back against a form field."""

    field: str
    message: str


# ── Entities ──────────────────────────────────────────────────────────


@dataclass
class BookingRequest:
    pickup_location: Optional[str] = None
    drop_location: Optional[str] = None
    trip_type: Optional[str] = None  # "one-way" or "round-trip", as posted
    date: Optional[str] = None
    time: Optional[str] = None
    car_type: Optional[str] = None
    name: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    distance: Optional[float] = None
    estimated_duration: Optional[str] = None
    pickup_coordinates: Optional[Location] = None
    drop_coordinates: Optional[Location] = None


@dataclass(frozen=True)
class FareBreakdown:
    estimation_id: str
    trip_type: TripType
    car_type: Optional[CarType]  # None when the requested car type is unknown
    distance_km: float
    rate_per_km: int
    base_price: int
    driver_allowance: int

    @property
    def total_price(self) -> int:
        return self.base_price + self.driver_allowance


@dataclass
class PricingResult:
    """Either a fare (with the normalised phone) or the list of errors."""

    fare: Optional[FareBreakdown] = None
    phone: Optional[str] = None
    errors: list[FieldError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors and self.fare is not None
