"""
Shortage Result Models

Derived, per-call results. Never stored.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from supplytracker.models.common import ItemStatus, Unit


# ============================================================================
# Category Shortages
# ============================================================================

class CategoryShortage(BaseModel):
    """Gap between recommended and held quantity for one recommended item."""

    item_id: str
    item_name: str
    actual: float
    needed: float
    unit: Unit
    missing: float = Field(..., ge=0)


class ShortageCalculationResult(BaseModel):
    """
    Aggregated shortage data for a category.

    primary_unit is None when totals count item types rather than quantities
    (render as "N of M items").
    """

    shortages: List[CategoryShortage] = Field(default_factory=list)
    total_actual: float = 0.0
    total_needed: float = 0.0
    primary_unit: Optional[Unit] = None

    # Food
    total_actual_calories: Optional[float] = None
    total_needed_calories: Optional[float] = None
    missing_calories: Optional[float] = None

    # Water
    drinking_water_needed: Optional[float] = None
    preparation_water_needed: Optional[float] = None


class CategoryStatusSummary(BaseModel):
    """Everything needed to display a category's status."""

    category_id: str
    item_count: int = 0
    status: ItemStatus
    completion_percentage: float = Field(default=0.0, ge=0, le=100)

    # Item status breakdown
    critical_count: int = 0
    warning_count: int = 0
    ok_count: int = 0

    shortages: List[CategoryShortage] = Field(default_factory=list)
    total_actual: float = 0.0
    total_needed: float = 0.0
    primary_unit: Optional[Unit] = None

    total_actual_calories: Optional[float] = None
    total_needed_calories: Optional[float] = None
    missing_calories: Optional[float] = None

    drinking_water_needed: Optional[float] = None
    preparation_water_needed: Optional[float] = None

    has_recommendations: bool = True


# ============================================================================
# Water Requirements
# ============================================================================

class WaterRequirementItem(BaseModel):
    """Preparation water needed by one inventory item."""

    item_id: str
    item_name: str
    quantity: float
    water_per_unit: float
    total_water_required: float


class WaterRequirementResult(BaseModel):
    """Preparation water needed by stored food versus drinking water held."""

    total_water_required: float = 0.0
    total_water_available: float = 0.0
    has_enough_water: bool = True
    water_shortfall: float = Field(default=0.0, ge=0)
    items_requiring_water: List[WaterRequirementItem] = Field(default_factory=list)
