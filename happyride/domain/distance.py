"""
Distance resolution for fare estimates.

Assumption
----------
The website measures road distance in the browser (Google Distance
Matrix) and posts it with the form.  When it could not, we fall back to
the great-circle (Haversine) distance between the picked coordinates,
and failing that to a fixed configured distance.  The fallback is never
random so that the same request always prices the same.

Complexity: O(1) per call.
"""

from __future__ import annotations

import math
from typing import Optional

from .entities import Location

EARTH_RADIUS_KM = 6_371.0


def haversine_km(
    lat1: float, lng1: float, lat2: float, lng2: float
) -> float:
    """Return the great-circle distance in **km** between two points."""
    lat1_r, lat2_r = math.radians(lat1), math.radians(lat2)
    dlat = math.radians(lat2 - lat1)
    dlng = math.radians(lng2 - lng1)

    a = (
        math.sin(dlat / 2) ** 2
        + math.cos(lat1_r) * math.cos(lat2_r) * math.sin(dlng / 2) ** 2
    )
    return 2 * EARTH_RADIUS_KM * math.asin(math.sqrt(a))


def is_usable_distance(value: Optional[float]) -> bool:
    return (
        value is not None
        and not isinstance(value, bool)
        and isinstance(value, (int, float))
        and math.isfinite(value)
        and value > 0
    )


def resolve_distance(
    distance: Optional[float],
    pickup: Optional[Location],
    drop: Optional[Location],
    fallback_km: float,
) -> float:
    """Pick the distance to price with: supplied > Haversine > fallback."""
    if is_usable_distance(distance):
        return distance

    if pickup is not None and drop is not None:
        km = math.floor(
            haversine_km(
                pickup.latitude, pickup.longitude, drop.latitude, drop.longitude
            )
            + 0.5
        )
        if km > 0:
            return float(km)

    return fallback_km
