'''
This file contains the runtime configuration for the hotel booking service.
'''
from decimal import Decimal
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class HotelSettings(BaseSettings):
    """Service settings, read from ``HOTEL_*`` environment variables or a ``.env`` file."""

    model_config = {"env_prefix": "HOTEL_", "env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    seed_sample_data: bool = True
    late_fee_rate: Decimal = Field(default=Decimal("0.5"), ge=0)
    host: str = "localhost"
    port: int = Field(default=8000, gt=0, lt=65536)

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, value: str) -> str:
        return value.upper() if isinstance(value, str) else value


def load_settings() -> HotelSettings:
    """Build the settings from the environment.

    Raises:
        ValueError: If a variable holds a value that does not validate.
    """

    return HotelSettings()
