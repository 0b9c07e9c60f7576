"""Centralised application settings loaded from environment / .env file."""

from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Runtime
    environment: str = "production"  # "development" exposes error details
    log_level: str = "INFO"
    cors_origins: list[str] = [
        "http://localhost:5173",
        "https://localhost:5173",
        "http://127.0.0.1:5173",
        "https://127.0.0.1:5173",
        "http://localhost:3000",
        "https://localhost:3000",
    ]
    rate_limit: str = "100/minute"
    host: str = "0.0.0.0"
    port: int = 3001

    # Pricing
    fallback_distance_km: float = 150.0  # used when no distance is supplied
    driver_allowance: int = 400  # INR, "driver bata"

    # Business contact details
    business_name: str = "Happy Ride Drop Taxi"
    business_phone: str = "+91 9087520500"
    business_email: str = "happyridedroptaxi@gmail.com"
    admin_whatsapp_number: str = "919087520500"
    customer_country_code: str = "91"

    # Email (SMTP)
    smtp_host: str = "smtp.gmail.com"
    smtp_port: int = 587
    smtp_user: Optional[str] = None
    smtp_password: Optional[str] = None
    admin_email: str = "happyridedroptaxi@gmail.com"

    # Telegram
    telegram_bot_token: Optional[str] = None
    telegram_chat_id: Optional[str] = None
    telegram_api_base: str = "https://api.telegram.org"

    notification_timeout_seconds: float = 10.0

    model_config = {"env_file": ".env", "extra": "ignore"}

    @property
    def is_development(self) -> bool:
        return self.environment.lower() == "development"


settings = Settings()
