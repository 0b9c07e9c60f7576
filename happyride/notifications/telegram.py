"""Telegram bot alert for the operator chat (``sendMessage`` Bot API call)."""

from __future__ import annotations

import logging

import httpx

from happyride.domain.pricing import format_inr, format_km
from happyride.notifications.base import BookingNotice, NotificationChannel

logger = logging.getLogger(__name__)


class TelegramError(Exception):
    """Raised when the Bot API rejects a message."""


def render_telegram_text(notice: BookingNotice) -> str:
    req, fare = notice.request, notice.fare
    lines = [
        f"🚖 New {notice.kind.value} {notice.reference}",
        f"👤 {req.name} ({req.phone})",
        f"📍 {req.pickup_location} → {req.drop_location}",
        f"🛣️ {fare.trip_type.value}, {format_km(fare.distance_km)} km",
        f"📅 {req.date} at {req.time}",
        f"🚗 {notice.car_label} @ {format_inr(fare.rate_per_km)}/km",
        f"💰 {format_inr(fare.total_price)}",
    ]
    if req.email:
        lines.insert(2, f"✉️ {req.email}")
    return "\n".join(lines)


class TelegramChannel(NotificationChannel):
    name = "telegram"

    def __init__(
        self,
        bot_token: str,
        chat_id: str,
        api_base: str = "https://api.telegram.org",
        timeout: float = 10.0,
    ):
        self.url = f"{api_base.rstrip('/')}/bot{bot_token}/sendMessage"
        self.chat_id = chat_id
        self.timeout = timeout

    async def send(self, notice: BookingNotice) -> None:
        payload = {"chat_id": self.chat_id, "text": render_telegram_text(notice)}
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            response = await client.post(self.url, json=payload)

        if response.status_code >= 400:
            raise TelegramError(f"Telegram API error: {response.status_code}")
        data = response.json()
        if not data.get("ok", False):
            raise TelegramError(f"Telegram API error: {data.get('description')}")
        logger.info("Telegram alert sent for %s", notice.reference)
