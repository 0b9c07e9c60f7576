"""
SMTP email notifications.

Two messages per booking: an admin alert (always) and a customer
confirmation (only when the customer left an email address).  ``smtplib``
is blocking, so the actual send runs in a worker thread.
"""

from __future__ import annotations

import asyncio
import logging
import smtplib
from email.message import EmailMessage
from html import escape
from typing import Optional

from happyride.domain.enums import NoticeKind
from happyride.domain.pricing import format_inr, format_km
from happyride.notifications.base import BookingNotice, NotificationChannel

logger = logging.getLogger(__name__)


def _rows(pairs: list[tuple[str, Optional[str]]]) -> str:
    return "".join(
        f'<tr><td style="padding: 8px 0; font-weight: bold;">{escape(label)}:</td>'
        f'<td style="padding: 8px 0;">{escape(str(value))}</td></tr>'
        for label, value in pairs
        if value
    )


def _trip_rows(notice: BookingNotice) -> str:
    req, fare = notice.request, notice.fare
    return _rows(
        [
            ("Pickup Location", req.pickup_location),
            ("Drop Location", req.drop_location),
            ("Trip Type", fare.trip_type.value.capitalize()),
            ("Estimated Distance", f"{format_km(fare.distance_km)} km"),
            ("Estimated Duration", req.estimated_duration),
            ("Date & Time", f"{req.date} at {req.time}"),
            ("Car Type", notice.car_label.capitalize()),
        ]
    )


def _fare_rows(notice: BookingNotice) -> str:
    fare = notice.fare
    return _rows(
        [
            ("Rate", f"{format_inr(fare.rate_per_km)}/km"),
            ("Base Amount", format_inr(fare.base_price)),
            ("Driver Bata", format_inr(fare.driver_allowance)),
            ("Total", format_inr(fare.total_price)),
        ]
    )


def render_admin_email(notice: BookingNotice, business_name: str) -> str:
    req = notice.request
    title = "Booking" if notice.kind == NoticeKind.BOOKING else "Estimate"
    customer = _rows([("Name", req.name), ("Phone", req.phone), ("Email", req.email)])
    return f"""
    <div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">
      <h1>🚗 New {title} Request</h1>
      <p>{escape(business_name)} &middot; {escape(notice.reference)}</p>
      <h3>📍 Trip Information</h3>
      <table style="width: 100%;">{_trip_rows(notice)}</table>
      <h3>💰 Fare</h3>
      <table style="width: 100%;">{_fare_rows(notice)}</table>
      <h3>👤 Customer Details</h3>
      <table style="width: 100%;">{customer}</table>
      <p><strong>⏰ Action Required:</strong> please contact the customer to confirm the booking.</p>
    </div>
    """


def render_customer_email(
    notice: BookingNotice, business_name: str, business_phone: str, business_email: str
) -> str:
    name = escape(notice.request.name or "customer")
    return f"""
    <div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">
      <h1>🚗 Booking Confirmation</h1>
      <p>Dear {name},</p>
      <p>Thank you for choosing {escape(business_name)}! We have received your
      request and will contact you shortly to confirm the details.</p>
      <h3>📍 Your Trip Details</h3>
      <table style="width: 100%;">{_trip_rows(notice)}</table>
      <h3>💰 Estimated Pricing</h3>
      <table style="width: 100%;">{_fare_rows(notice)}</table>
      <p>*Final price may vary based on actual distance and additional charges</p>
      <p><strong>Phone:</strong> {escape(business_phone)}<br>
      <strong>Email:</strong> {escape(business_email)}</p>
    </div>
    """


class EmailChannel(NotificationChannel):
    name = "email"

    def __init__(
        self,
        host: str,
        port: int,
        username: str,
        password: str,
        admin_address: str,
        business_name: str,
        business_phone: str,
        business_email: str,
        timeout: float = 10.0,
    ):
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.admin_address = admin_address
        self.business_name = business_name
        self.business_phone = business_phone
        self.business_email = business_email
        self.timeout = timeout

    def build_messages(self, notice: BookingNotice) -> list[EmailMessage]:
        req = notice.request
        admin = EmailMessage()
        admin["From"] = self.username
        admin["To"] = self.admin_address
        admin["Subject"] = f"New Taxi Booking Request - {req.name}"
        admin.set_content(f"New request {notice.reference} from {req.name} ({req.phone}).")
        admin.add_alternative(render_admin_email(notice, self.business_name), subtype="html")
        messages = [admin]

        if req.email and req.email.strip():
            customer = EmailMessage()
            customer["From"] = self.username
            customer["To"] = req.email.strip()
            customer["Subject"] = f"Booking Confirmation - {self.business_name}"
            customer.set_content(f"Thank you for booking with {self.business_name}.")
            customer.add_alternative(
                render_customer_email(
                    notice, self.business_name, self.business_phone, self.business_email
                ),
                subtype="html",
            )
            messages.append(customer)
        return messages

    def _deliver(self, messages: list[EmailMessage]) -> None:
        with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as smtp:
            smtp.starttls()
            smtp.login(self.username, self.password)
            for message in messages:
                smtp.send_message(message)

    async def send(self, notice: BookingNotice) -> None:
        messages = self.build_messages(notice)
        await asyncio.to_thread(self._deliver, messages)
        logger.info("Sent %d email(s) for %s", len(messages), notice.reference)
