"""Pydantic request / response schemas for the REST API.

The website posts camelCase JSON, so every schema aliases its fields with
``to_camel`` and serialises by alias.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from happyride.domain.entities import BookingRequest, Location
from happyride.domain.enums import TripType


class CamelModel(BaseModel):
    model_config = {"alias_generator": to_camel, "populate_by_name": True}


# ── Requests ──────────────────────────────────────────────────────────


class Coordinates(CamelModel):
    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)

    def to_location(self) -> Location:
        return Location(self.lat, self.lng)


class BookingRequestBody(CamelModel):
    """Booking form.  Required fields are checked by the domain so that
    every missing field is reported together."""

    pickup_location: Optional[str] = None
    drop_location: Optional[str] = None
    trip_type: Optional[str] = None
    date: Optional[str] = None
    time: Optional[str] = None
    car_type: Optional[str] = None
    name: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    distance: Optional[float] = Field(None, description="Road distance in km, if measured.")
    estimated_duration: Optional[str] = None
    pickup_coordinates: Optional[Coordinates] = None
    drop_coordinates: Optional[Coordinates] = None

    def to_domain(self) -> BookingRequest:
        return BookingRequest(
            pickup_location=self.pickup_location,
            drop_location=self.drop_location,
            trip_type=self.trip_type,
            date=self.date,
            time=self.time,
            car_type=self.car_type,
            name=self.name,
            phone=self.phone,
            email=self.email,
            distance=self.distance,
            estimated_duration=self.estimated_duration,
            pickup_coordinates=(
                self.pickup_coordinates.to_location() if self.pickup_coordinates else None
            ),
            drop_coordinates=(
                self.drop_coordinates.to_location() if self.drop_coordinates else None
            ),
        )


# ── Responses ─────────────────────────────────────────────────────────


class FareDisplay(CamelModel):
    distance: str
    rate: str
    base_amount: str
    driver_bata: str
    total: str


class WhatsAppLinks(CamelModel):
    admin: str
    customer: str


class ContactInfo(CamelModel):
    phone: str
    email: str


class FareData(CamelModel):
    estimation_id: Optional[str] = None
    booking_id: Optional[str] = None
    trip_type: TripType
    car_type: str
    estimated_distance: float
    estimated_duration: str
    rate_per_km: int
    base_price: int
    driver_bata: int
    total_price: int
    breakdown: FareDisplay
    whatsapp_links: WhatsAppLinks
    contact_info: ContactInfo


class BookingResponse(CamelModel):
    success: bool = True
    message: str
    data: FareData


class FieldErrorOut(CamelModel):
    field: str
    message: str


class ErrorResponse(CamelModel):
    success: bool = False
    message: str
    errors: Optional[list[FieldErrorOut]] = None
    error: Optional[str] = None
    available_endpoints: Optional[list[str]] = None


class HealthResponse(CamelModel):
    status: str = "OK"
    message: str = "Backend server is running"
    timestamp: datetime
    endpoints: list[str]


class PingResponse(CamelModel):
    message: str = "Backend is working!"
    timestamp: datetime
    server: str
