"""
Inventory Data Models

Inventory items held by the household and the recommended-item catalog
they are measured against.
"""

from datetime import date
from typing import Iterable, List, Optional

from pydantic import BaseModel, Field, field_validator

from supplytracker.models.common import CUSTOM_ITEM_TYPE, Unit


# ============================================================================
# Recommended Items
# ============================================================================

class RecommendedItemDefinition(BaseModel):
    """
    A catalog entry describing a supply type's baseline need and scaling rules.

    The id doubles as the item type key inventory items refer to.
    """

    id: str
    name: Optional[str] = Field(default=None, description="Display/translation key, defaults to id")
    category: str
    base_quantity: float = Field(..., gt=0)
    unit: Unit

    # Scaling rules
    scale_with_people: bool = False
    scale_with_days: bool = False
    scale_with_pets: bool = False
    requires_freezer: bool = False

    # Food data
    calories_per_unit: Optional[float] = Field(default=None, ge=0)
    calories_per_100g: Optional[float] = Field(default=None, ge=0)
    weight_grams_per_unit: Optional[float] = Field(default=None, gt=0)

    # Liters of water needed to prepare one unit
    requires_water_liters: Optional[float] = Field(default=None, gt=0)

    @property
    def display_name(self) -> str:
        return self.name or self.id


class RecommendedItemsCatalog(BaseModel):
    """
    A set of recommended items (built-in kit or an imported one).

    Loaded once and treated as read-only afterwards.
    """

    name: str = "default"
    version: str = "1.0.0"
    description: Optional[str] = None
    items: List[RecommendedItemDefinition] = Field(default_factory=list)

    @field_validator("items")
    @classmethod
    def unique_ids(cls, v: List[RecommendedItemDefinition]) -> List[RecommendedItemDefinition]:
        seen = set()
        for item in v:
            if item.id in seen:
                raise ValueError(f"Duplicate recommended item id: {item.id}")
            seen.add(item.id)
        return v

    def get(self, item_id: str) -> Optional[RecommendedItemDefinition]:
        for item in self.items:
            if item.id == item_id:
                return item
        return None

    def for_category(
        self,
        category_id: str,
        disabled_ids: Iterable[str] = (),
    ) -> List[RecommendedItemDefinition]:
        """Enabled definitions for a category, in catalog order."""
        disabled = set(disabled_ids)
        return [
            item for item in self.items
            if item.category == category_id and item.id not in disabled
        ]


# ============================================================================
# Inventory
# ============================================================================

class InventoryItem(BaseModel):
    """
    A supply the household holds.

    item_type is a recommended item id, or "custom" for items the user
    created without a template.
    """

    id: str
    name: str
    item_type: str = Field(default=CUSTOM_ITEM_TYPE)
    category_id: str
    quantity: float = Field(..., ge=0)
    unit: Unit

    # Expiration
    never_expires: bool = False
    expiration_date: Optional[date] = None

    # User override: treat as sufficient regardless of quantity
    marked_as_enough: bool = False

    # Per-item overrides of catalog values
    calories_per_unit: Optional[float] = Field(default=None, ge=0)
    weight_grams: Optional[float] = Field(default=None, gt=0, description="Weight of one unit")
    requires_water_liters: Optional[float] = Field(default=None, ge=0)

    @property
    def is_custom(self) -> bool:
        return self.item_type == CUSTOM_ITEM_TYPE
