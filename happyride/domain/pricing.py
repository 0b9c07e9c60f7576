"""
Fare Engine  (Strategy Pattern)
===============================

Formula
-------
Total = round_half_up(Distance x Rate_Per_KM) + Driver_Allowance

* **Rate_Per_KM** depends on the trip type (strategy) and the car type.
* **Driver_Allowance** ("driver bata") is a flat fee, 400 INR by default.
* A trip shorter than the trip type's minimum distance is not priced.

Complexity: O(1) per estimate.
"""

from __future__ import annotations

import math
import random
from abc import ABC
from datetime import datetime, timezone
from typing import Callable, ClassVar, Optional

from .distance import resolve_distance
from .entities import BookingRequest, FareBreakdown, FieldError, PricingResult
from .enums import CarType, TripType, minimum_distance, parse_trip_type
from .validation import normalize_phone, validate_booking

DEFAULT_RATE_PER_KM = 14  # unknown car types, regardless of trip type


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive values; ``round()`` would round half to even."""
    return math.floor(value + 0.5)


def parse_car_type(value: Optional[str]) -> Optional[CarType]:
    try:
        return CarType((value or "").strip().lower())
    except ValueError:
        return None


def format_km(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


def format_inr(amount: int) -> str:
    return f"₹{amount:,}"


# ── Strategy hierarchy ────────────────────────────────────────────────


class TripPricing(ABC):
    trip_type: ClassVar[TripType]
    rates: ClassVar[dict[CarType, int]]

    @property
    def minimum_distance_km(self) -> int:
        return minimum_distance(self.trip_type)

    def rate_for(self, car_type: Optional[CarType]) -> int:
        if car_type is None:
            return DEFAULT_RATE_PER_KM
        return self.rates.get(car_type, DEFAULT_RATE_PER_KM)

    def check_distance(self, distance_km: float) -> Optional[FieldError]:
        minimum = self.minimum_distance_km
        if distance_km >= minimum:
            return None
        return FieldError(
            "distance",
            f"Minimum distance for {self.trip_type.value} trips is {minimum} km. "
            f"Current distance: {format_km(distance_km)} km",
        )


class OneWayPricing(TripPricing):
    trip_type = TripType.ONE_WAY
    rates = {
        CarType.SEDAN: 14,
        CarType.ETIOS: 15,
        CarType.SUV: 19,
        CarType.INNOVA: 20,
    }


class RoundTripPricing(TripPricing):
    trip_type = TripType.ROUND_TRIP
    rates = {
        CarType.SEDAN: 13,
        CarType.ETIOS: 14,
        CarType.SUV: 18,
        CarType.INNOVA: 18,
    }


STRATEGIES: dict[TripType, TripPricing] = {
    TripType.ONE_WAY: OneWayPricing(),
    TripType.ROUND_TRIP: RoundTripPricing(),
}


def rate_per_km(car_type: Optional[str], trip_type: TripType) -> int:
    """Pure rate lookup for ``(car_type, trip_type)``."""
    return STRATEGIES[trip_type].rate_for(parse_car_type(car_type))


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# ── Engine facade ─────────────────────────────────────────────────────


class PricingEngine:
    """High-level API used by the booking and estimate endpoints.

    The clock and RNG only feed the estimation id; with both fixed the
    engine is fully deterministic.
    """

    ID_PREFIX = "HRD"

    def __init__(
        self,
        driver_allowance: int = 400,
        fallback_distance_km: float = 150.0,
        clock: Callable[[], datetime] = _utcnow,
        rng: Optional[random.Random] = None,
    ):
        self.driver_allowance = driver_allowance
        self.fallback_distance_km = fallback_distance_km
        self.clock = clock
        self.rng = rng or random.Random()

    def new_estimation_id(self) -> str:
        millis = int(self.clock().timestamp() * 1000)
        return f"{self.ID_PREFIX}{millis}{self.rng.randrange(16**4):04X}"

    def resolve_distance(self, request: BookingRequest) -> float:
        return resolve_distance(
            request.distance,
            request.pickup_coordinates,
            request.drop_coordinates,
            self.fallback_distance_km,
        )

    def validate_and_price(self, request: BookingRequest) -> PricingResult:
        errors = validate_booking(request)
        distance_km = self.resolve_distance(request)

        trip_type = parse_trip_type(request.trip_type)
        strategy = STRATEGIES[trip_type] if trip_type else None
        car_type = parse_car_type(request.car_type)
        rate = strategy.rate_for(car_type) if strategy else DEFAULT_RATE_PER_KM

        if strategy is not None:
            distance_error = strategy.check_distance(distance_km)
            if distance_error is None and not math.isfinite(distance_km * rate):
                distance_error = FieldError("distance", "Distance is too large to price")
            if distance_error is not None:
                errors.append(distance_error)

        if errors or strategy is None:
            return PricingResult(errors=errors)

        fare = FareBreakdown(
            estimation_id=self.new_estimation_id(),
            trip_type=strategy.trip_type,
            car_type=car_type,
            distance_km=distance_km,
            rate_per_km=rate,
            base_price=round_half_up(distance_km * rate),
            driver_allowance=self.driver_allowance,
        )
        return PricingResult(fare=fare, phone=normalize_phone(request.phone))
