"""
FastAPI application factory.

* Registers routes for bookings / estimates and health checks under ``/api``.
* Applies CORS, access logging and rate-limiting middleware.
* Maps validation and unexpected errors to the JSON error envelope.
* Swagger / OpenAPI UI available at ``/docs``.
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from happyride.api.errors import register_exception_handlers
from happyride.api.middleware import limiter, log_requests
from happyride.api.routes import bookings, health
from happyride.config import settings

logging.basicConfig(level=settings.log_level.upper())


def create_app() -> FastAPI:
    app = FastAPI(
        title="Happy Ride Drop Taxi API",
        description=(
            "Validates taxi booking requests from the website, estimates the "
            "fare from a per-km rate table and notifies the operator by "
            "email, Telegram and WhatsApp links."
        ),
        version="1.0.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", "Accept", "Origin", "X-Requested-With"],
    )
    app.middleware("http")(log_requests)

    # Rate limiter
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    register_exception_handlers(app)

    # Routers
    app.include_router(bookings.router, prefix="/api")
    app.include_router(health.router, prefix="/api")

    return app
