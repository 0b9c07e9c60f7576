"""Notification channel interface and the payload every channel receives."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from happyride.domain.entities import BookingRequest, FareBreakdown
from happyride.domain.enums import NoticeKind


@dataclass(frozen=True)
class BookingNotice:
    kind: NoticeKind
    request: BookingRequest
    fare: FareBreakdown
    phone: str  # normalised 10 digits

    @property
    def reference(self) -> str:
        return self.fare.estimation_id

    @property
    def car_label(self) -> str:
        return (self.request.car_type or "not specified").strip().upper()


class NotificationChannel(ABC):
    name: str = "channel"

    @abstractmethod
    async def send(self, notice: BookingNotice) -> None:
        """Deliver *notice*; raise on failure, the dispatcher logs it."""
