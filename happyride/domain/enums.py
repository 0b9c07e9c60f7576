"""Domain enumerations and the minimum-distance policy."""

import enum
from typing import Optional


class TripType(str, enum.Enum):
    ONE_WAY = "one-way"
    ROUND_TRIP = "round-trip"


class CarType(str, enum.Enum):
    SEDAN = "sedan"
    ETIOS = "etios"
    SUV = "suv"
    INNOVA = "innova"


class NoticeKind(str, enum.Enum):
    ESTIMATE = "estimate"
    BOOKING = "booking"


# Trip type -> shortest distance (km) we accept, inclusive
MINIMUM_DISTANCE_KM: dict[TripType, int] = {
    TripType.ONE_WAY: 130,
    TripType.ROUND_TRIP: 250,
}


def minimum_distance(trip_type: TripType) -> int:
    return MINIMUM_DISTANCE_KM[trip_type]


def parse_trip_type(value: Optional[str]) -> Optional[TripType]:
    """``" Round-Trip "`` -> ``TripType.ROUND_TRIP``; anything unknown -> ``None``."""
    try:
        return TripType((value or "").strip().lower())
    except ValueError:
        return None
