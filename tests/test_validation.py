"""Unit tests for booking form validation (collect-all semantics)."""

import pytest

from happyride.domain.entities import BookingRequest, FieldError
from happyride.domain.enums import TripType
from happyride.domain.validation import (
    check_contact,
    check_required,
    check_trip_type,
    is_valid_email,
    normalize_phone,
    validate_booking,
)
from tests.conftest import make_booking


class TestRequiredFields:
    def test_complete_booking_has_no_errors(self):
        assert validate_booking(make_booking()) == []

    def test_empty_request_reports_every_field(self):
        errors = check_required(BookingRequest())
        assert [e.field for e in errors] == [
            "pickupLocation",
            "dropLocation",
            "tripType",
            "date",
            "time",
            "name",
            "phone",
        ]

    def test_missing_name_and_phone_reported_together(self):
        errors = validate_booking(make_booking(name=None, phone=None))
        assert errors == [
            FieldError("name", "Name is required"),
            FieldError("phone", "Phone number is required"),
        ]

    @pytest.mark.parametrize("blank", ["", "   ", "\t\n"])
    def test_whitespace_only_is_missing(self, blank):
        errors = validate_booking(make_booking(pickup_location=blank))
        assert errors == [FieldError("pickupLocation", "Pickup location is required")]

    def test_missing_trip_type(self):
        errors = validate_booking(make_booking(trip_type=None))
        assert errors == [FieldError("tripType", "Trip type is required")]

    def test_car_type_is_not_required(self):
        assert validate_booking(make_booking(car_type=None)) == []


class TestTripType:
    @pytest.mark.parametrize("value", ["one-way", "round-trip", " Round-Trip ", TripType.ONE_WAY])
    def test_known_values(self, value):
        assert check_trip_type(make_booking(trip_type=value)) == []

    def test_unknown_value_is_a_field_error(self):
        assert check_trip_type(make_booking(trip_type="weekly")) == [
            FieldError("tripType", "Trip type must be one-way or round-trip")
        ]

    @pytest.mark.parametrize("blank", ["", "  "])
    def test_blank_value_is_reported_as_missing(self, blank):
        assert validate_booking(make_booking(trip_type=blank)) == [
            FieldError("tripType", "Trip type is required")
        ]

    def test_unknown_value_reported_with_other_errors(self):
        errors = validate_booking(make_booking(trip_type="weekly", name="", phone="123"))
        assert [e.field for e in errors] == ["name", "tripType", "phone"]


class TestPhone:
    def test_punctuation_and_whitespace_are_stripped(self):
        assert normalize_phone("98765-43210 ") == "9876543210"
        assert normalize_phone("(987) 654 3210") == "9876543210"
        assert check_contact(make_booking(phone="98765-43210 ")) == []

    @pytest.mark.parametrize("phone", ["987654321", "98765432101", "phone"])
    def test_not_ten_digits_is_rejected(self, phone):
        assert check_contact(make_booking(phone=phone)) == [
            FieldError("phone", "Please enter a valid 10-digit phone number")
        ]

    def test_missing_phone_only_reports_presence(self):
        errors = validate_booking(make_booking(phone=""))
        assert errors == [FieldError("phone", "Phone number is required")]


class TestEmail:
    @pytest.mark.parametrize("email", ["a@b.co", "test.user@example.com", " a@b.co "])
    def test_valid(self, email):
        assert check_contact(make_booking(email=email)) == []

    @pytest.mark.parametrize("email", ["not-an-email", "a@b", "a b@c.d", "a@@b.c"])
    def test_invalid(self, email):
        assert check_contact(make_booking(email=email)) == [
            FieldError("email", "Please enter a valid email address")
        ]

    @pytest.mark.parametrize("email", [None, "", "  "])
    def test_optional(self, email):
        assert check_contact(make_booking(email=email)) == []

    def test_pattern(self):
        assert is_valid_email("x@y.z")
        assert not is_valid_email("x@y")


class TestCollectAll:
    def test_presence_format_and_distance_errors_together(self, engine):
        booking = make_booking(
            name="", phone="12345", email="nope", trip_type=TripType.ONE_WAY, distance=50
        )
        result = engine.validate_and_price(booking)

        assert not result.ok
        assert [e.field for e in result.errors] == ["name", "phone", "email", "distance"]

    def test_distance_not_checked_without_trip_type(self, engine):
        result = engine.validate_and_price(make_booking(trip_type=None, distance=10))
        assert [e.field for e in result.errors] == ["tripType"]

    def test_distance_not_checked_with_unknown_trip_type(self, engine):
        result = engine.validate_and_price(make_booking(trip_type="weekly", distance=10))
        assert [e.field for e in result.errors] == ["tripType"]
