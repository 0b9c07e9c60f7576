"""
Booking form validation rules.

Every rule appends to a shared error list instead of stopping at the
first failure, so the caller can redisplay the form with all problems
marked at once.
"""

from __future__ import annotations

import re
from typing import Optional

from .entities import BookingRequest, FieldError
from .enums import parse_trip_type

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
PHONE_DIGITS = 10

# (attribute, form field, label) in the order errors are reported
REQUIRED_FIELDS: tuple[tuple[str, str, str], ...] = (
    ("pickup_location", "pickupLocation", "Pickup location"),
    ("drop_location", "dropLocation", "Drop location"),
    ("trip_type", "tripType", "Trip type"),
    ("date", "date", "Date"),
    ("time", "time", "Time"),
    ("name", "name", "Name"),
    ("phone", "phone", "Phone number"),
)


def _is_blank(value: object) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def normalize_phone(phone: Optional[str]) -> str:
    """Drop everything but digits: ``"98765-43210 "`` -> ``"9876543210"``."""
    return re.sub(r"\D", "", phone or "")


def is_valid_email(email: str) -> bool:
    return bool(EMAIL_RE.match(email))


def check_required(request: BookingRequest) -> list[FieldError]:
    return [
        FieldError(form_field, f"{label} is required")
        for attr, form_field, label in REQUIRED_FIELDS
        if _is_blank(getattr(request, attr))
    ]


def check_trip_type(request: BookingRequest) -> list[FieldError]:
    if _is_blank(request.trip_type) or parse_trip_type(request.trip_type) is not None:
        return []
    return [FieldError("tripType", "Trip type must be one-way or round-trip")]


def check_contact(request: BookingRequest) -> list[FieldError]:
    """Phone and email format checks; absent values are left to ``check_required``."""
    errors: list[FieldError] = []

    if not _is_blank(request.phone):
        if len(normalize_phone(request.phone)) != PHONE_DIGITS:
            errors.append(
                FieldError("phone", "Please enter a valid 10-digit phone number")
            )

    if not _is_blank(request.email):
        if not is_valid_email(request.email.strip()):
            errors.append(FieldError("email", "Please enter a valid email address"))

    return errors


def validate_booking(request: BookingRequest) -> list[FieldError]:
    return check_required(request) + check_trip_type(request) + check_contact(request)
