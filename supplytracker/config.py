"""
Engine Configuration

Tunable calculation constants loaded from environment variables
(prefix SUPPLYTRACKER_) or a local .env file.
"""

import logging
from functools import lru_cache
from typing import List, Optional

from pydantic_settings import BaseSettings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class Settings(BaseSettings):
    """Calculation settings loaded from environment."""

    # Household scaling
    adult_multiplier: float = 1.0
    children_multiplier: float = 0.75
    pet_multiplier: float = 1.0

    # Daily needs per person
    daily_calories_per_person: float = 2000
    daily_water_per_person: float = 3.0  # liters

    # Expiration
    expiring_soon_days: int = 30
    expiring_soon_alert_days: int = 30

    # Item status
    low_quantity_warning_ratio: float = 0.5

    # Category / dashboard status buckets
    critical_percentage_threshold: float = 30
    warning_percentage_threshold: float = 70
    ok_score_threshold: float = 80
    warning_score_threshold: float = 50

    # Stock alerts
    critically_low_stock_percentage: float = 25
    low_stock_percentage: float = 50

    # Strategy routing
    food_category_ids: List[str] = ["food"]
    item_type_count_category_ids: List[str] = ["communication-info"]

    # Logging
    log_level: str = "INFO"

    class Config:
        env_prefix = "SUPPLYTRACKER_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging for applications embedding the engine."""
    logging.basicConfig(
        level=(level or get_settings().log_level).upper(),
        format=LOG_FORMAT,
    )
