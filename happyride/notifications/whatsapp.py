"""
WhatsApp click-to-chat links.

Nothing is sent from the server: the links are returned to the website,
which opens them so the customer (or the admin) can send the prefilled
message from their own WhatsApp.
"""

from __future__ import annotations

from urllib.parse import quote

from happyride.domain.enums import NoticeKind
from happyride.domain.pricing import format_inr, format_km
from happyride.notifications.base import BookingNotice

WA_ME = "https://wa.me"


def whatsapp_link(number: str, text: str) -> str:
    """``https://wa.me/<digits>?text=<url-encoded text>``."""
    digits = "".join(c for c in number if c.isdigit())
    return f"{WA_ME}/{digits}?text={quote(text, safe='')}"


def customer_message(notice: BookingNotice, business_name: str, business_phone: str) -> str:
    req, fare = notice.request, notice.fare
    heading = "Booking Request" if notice.kind == NoticeKind.BOOKING else "Price Estimation"
    return (
        f"🚖 {business_name} - "
        f"{heading}\n\n"
        f"Reference: {notice.reference}\n"
        f"From: {req.pickup_location}\n"
        f"To: {req.drop_location}\n"
        f"Trip: {fare.trip_type.value}\n"
        f"Date: {req.date} at {req.time}\n"
        f"Car: {notice.car_label}\n"
        f"Distance: {format_km(fare.distance_km)}km\n"
        f"Estimated Price: {format_inr(fare.total_price)}\n\n"
        f"To confirm booking, please reply to this message or call {business_phone}"
    )


def admin_message(notice: BookingNotice) -> str:
    req, fare = notice.request, notice.fare
    title = (
        "New Booking Request"
        if notice.kind == NoticeKind.BOOKING
        else "New Price Estimation Request"
    )
    return (
        f"🚖 {title}\n\n"
        f"ID: {notice.reference}\n"
        f"Customer: {req.name}\n"
        f"Phone: {req.phone}\n"
        f"Email: {req.email or 'Not provided'}\n"
        f"From: {req.pickup_location}\n"
        f"To: {req.drop_location}\n"
        f"Trip: {fare.trip_type.value}\n"
        f"Date: {req.date} at {req.time}\n"
        f"Car: {notice.car_label}\n"
        f"Distance: {format_km(fare.distance_km)}km\n"
        f"Estimated Price: {format_inr(fare.total_price)}"
    )


def build_links(
    notice: BookingNotice,
    *,
    admin_number: str,
    country_code: str,
    business_name: str,
    business_phone: str,
) -> dict[str, str]:
    return {
        "admin": whatsapp_link(admin_number, admin_message(notice)),
        "customer": whatsapp_link(
            f"{country_code}{notice.phone}",
            customer_message(notice, business_name, business_phone),
        ),
    }
