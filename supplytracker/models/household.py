"""
Household Models

The household being supplied and the per-call calculation options.
"""

from typing import Optional

from pydantic import BaseModel, Field


class HouseholdConfig(BaseModel):
    """
    Household configuration.

    Owned by the household store; the engine only reads it.
    """

    adults: int = Field(..., ge=0)
    children: int = Field(default=0, ge=0)
    pets: int = Field(default=0, ge=0)
    supply_duration_days: int = Field(..., ge=0, description="Days of supply to keep")
    use_freezer: bool = False

    # False = inventory-only mode, no recommendations at all
    enabled: bool = True


class CalculationOptions(BaseModel):
    """
    User-adjustable calculation options.

    Unset values fall back to the engine Settings.
    """

    children_multiplier: Optional[float] = Field(
        default=None,
        ge=0,
        description="Share of an adult's needs a child has"
    )
    daily_calories_per_person: Optional[float] = Field(default=None, ge=0)
    daily_water_per_person: Optional[float] = Field(
        default=None,
        ge=0,
        description="Liters per person per day"
    )
