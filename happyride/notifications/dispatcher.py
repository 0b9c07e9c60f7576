"""
Fire-and-forget notification fan-out.

A booking counts as accepted once it has been validated and priced, so
a channel failure is logged here and never reaches the HTTP caller.
There are no retries.
"""

from __future__ import annotations

import logging

from happyride.config import Settings
from happyride.notifications.base import BookingNotice, NotificationChannel
from happyride.notifications.email import EmailChannel
from happyride.notifications.telegram import TelegramChannel

logger = logging.getLogger(__name__)


class NotificationDispatcher:
    def __init__(self, channels: list[NotificationChannel]):
        self.channels = channels

    async def dispatch(self, notice: BookingNotice) -> int:
        """Send *notice* on every channel.  Returns how many succeeded."""
        delivered = 0
        for channel in self.channels:
            try:
                await channel.send(notice)
                delivered += 1
            except Exception:
                logger.exception(
                    "%s notification failed for %s", channel.name, notice.reference
                )
        return delivered


def build_dispatcher(settings: Settings) -> NotificationDispatcher:
    """Wire up every channel that has credentials configured."""
    channels: list[NotificationChannel] = []

    if settings.smtp_user and settings.smtp_password:
        channels.append(
            EmailChannel(
                host=settings.smtp_host,
                port=settings.smtp_port,
                username=settings.smtp_user,
                password=settings.smtp_password,
                admin_address=settings.admin_email,
                business_name=settings.business_name,
                business_phone=settings.business_phone,
                business_email=settings.business_email,
                timeout=settings.notification_timeout_seconds,
            )
        )
    else:
        logger.info("SMTP credentials not set; email notifications disabled")

    if settings.telegram_bot_token and settings.telegram_chat_id:
        channels.append(
            TelegramChannel(
                bot_token=settings.telegram_bot_token,
                chat_id=settings.telegram_chat_id,
                api_base=settings.telegram_api_base,
                timeout=settings.notification_timeout_seconds,
            )
        )
    else:
        logger.info("Telegram bot not configured; Telegram notifications disabled")

    return NotificationDispatcher(channels)
