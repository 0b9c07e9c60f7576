"""
Booking endpoints
=================

POST /api/estimate -- validate the form and return a fare estimate
POST /api/book     -- same rules, acknowledged as a booking request

Both dispatch admin/customer notifications in the background once the
fare is computed; the response never waits on them.
"""

import logging

from fastapi import APIRouter, BackgroundTasks, Depends, Request

from happyride.api.dependencies import get_dispatcher, get_pricing_engine
from happyride.api.errors import BookingRejected
from happyride.api.middleware import limiter
from happyride.api.schemas import (
    BookingRequestBody,
    BookingResponse,
    ContactInfo,
    ErrorResponse,
    FareData,
    FareDisplay,
    WhatsAppLinks,
)
from happyride.config import settings
from happyride.domain.enums import NoticeKind
from happyride.domain.pricing import PricingEngine, format_inr, format_km
from happyride.notifications.base import BookingNotice
from happyride.notifications.dispatcher import NotificationDispatcher
from happyride.notifications.whatsapp import build_links

logger = logging.getLogger(__name__)

router = APIRouter(tags=["bookings"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Validation failed"},
    500: {"model": ErrorResponse, "description": "Internal server error"},
}


def _fare_data(notice: BookingNotice) -> FareData:
    fare = notice.fare
    key = "booking_id" if notice.kind == NoticeKind.BOOKING else "estimation_id"
    reference = {key: notice.reference}
    links = build_links(
        notice,
        admin_number=settings.admin_whatsapp_number,
        country_code=settings.customer_country_code,
        business_name=settings.business_name,
        business_phone=settings.business_phone,
    )
    return FareData(
        **reference,
        trip_type=fare.trip_type,
        car_type=fare.car_type.value if fare.car_type else (notice.request.car_type or ""),
        estimated_distance=fare.distance_km,
        estimated_duration=notice.request.estimated_duration or "Calculating...",
        rate_per_km=fare.rate_per_km,
        base_price=fare.base_price,
        driver_bata=fare.driver_allowance,
        total_price=fare.total_price,
        breakdown=FareDisplay(
            distance=f"{format_km(fare.distance_km)} km",
            rate=f"{format_inr(fare.rate_per_km)}/km",
            base_amount=format_inr(fare.base_price),
            driver_bata=format_inr(fare.driver_allowance),
            total=format_inr(fare.total_price),
        ),
        whatsapp_links=WhatsAppLinks(**links),
        contact_info=ContactInfo(phone=settings.business_phone, email=settings.business_email),
    )


def _process(
    kind: NoticeKind,
    body: BookingRequestBody,
    engine: PricingEngine,
    dispatcher: NotificationDispatcher,
    background_tasks: BackgroundTasks,
) -> FareData:
    booking = body.to_domain()
    result = engine.validate_and_price(booking)

    if not result.ok:
        logger.info(
            "%s rejected: %s", kind.value, ", ".join(e.field for e in result.errors)
        )
        raise BookingRejected(result.errors)

    notice = BookingNotice(kind=kind, request=booking, fare=result.fare, phone=result.phone)
    background_tasks.add_task(dispatcher.dispatch, notice)

    logger.info(
        "%s %s priced: %s km x %d/km = %d",
        kind.value,
        notice.reference,
        format_km(result.fare.distance_km),
        result.fare.rate_per_km,
        result.fare.total_price,
    )
    return _fare_data(notice)


@router.post(
    "/estimate",
    response_model=BookingResponse,
    response_model_exclude_none=True,
    summary="Validate a booking form and estimate the fare",
    responses=ERROR_RESPONSES,
)
@limiter.limit(settings.rate_limit)
async def estimate(
    request: Request,
    body: BookingRequestBody,
    background_tasks: BackgroundTasks,
    engine: PricingEngine = Depends(get_pricing_engine),
    dispatcher: NotificationDispatcher = Depends(get_dispatcher),
):
    data = _process(NoticeKind.ESTIMATE, body, engine, dispatcher, background_tasks)
    return BookingResponse(message="Price estimation calculated successfully!", data=data)


@router.post(
    "/book",
    response_model=BookingResponse,
    response_model_exclude_none=True,
    summary="Submit a booking request",
    responses=ERROR_RESPONSES,
)
@limiter.limit(settings.rate_limit)
async def book(
    request: Request,
    body: BookingRequestBody,
    background_tasks: BackgroundTasks,
    engine: PricingEngine = Depends(get_pricing_engine),
    dispatcher: NotificationDispatcher = Depends(get_dispatcher),
):
    data = _process(NoticeKind.BOOKING, body, engine, dispatcher, background_tasks)
    return BookingResponse(
        message="Booking request submitted successfully! We will contact you shortly.",
        data=data,
    )
