"""
Water Requirements

Water needed to prepare stored food (e.g. pasta, rice, dried meals) and
drinking water held to cover it.
"""

from typing import List, Optional, Sequence

from supplytracker.models.common import BOTTLED_WATER_ID, WATER_CATEGORY_ID, Unit
from supplytracker.models.inventory import InventoryItem, RecommendedItemDefinition
from supplytracker.models.shortages import WaterRequirementItem, WaterRequirementResult
from supplytracker.services.item_matching import normalize_item_name


def get_water_requirement_per_unit(
    item: InventoryItem,
    recommended_items: Sequence[RecommendedItemDefinition] = (),
) -> float:
    """
    Liters of water needed to prepare one unit of an item.

    The item's own value wins, then the definition its type (normalized)
    points to. Items with neither need no water.
    """
    if item.requires_water_liters is not None and item.requires_water_liters > 0:
        return item.requires_water_liters

    item_type = normalize_item_name(item.item_type)
    for definition in recommended_items:
        if definition.id == item_type:
            if definition.requires_water_liters is not None and definition.requires_water_liters > 0:
                return definition.requires_water_liters
            break

    return 0.0


def calculate_total_water_required(
    items: Sequence[InventoryItem],
    recommended_items: Sequence[RecommendedItemDefinition] = (),
) -> float:
    """Total preparation water for all items (not rounded)."""
    return sum(
        get_water_requirement_per_unit(item, recommended_items) * item.quantity
        for item in items
    )


def _is_drinking_water(item: InventoryItem) -> bool:
    if item.category_id != WATER_CATEGORY_ID or item.unit != Unit.LITERS:
        return False
    return (
        item.item_type == BOTTLED_WATER_ID
        or "water" in item.item_type.lower()
        or "water" in item.name.lower()
    )


def calculate_total_water_available(items: Sequence[InventoryItem]) -> float:
    """Liters of drinking water held in the water category."""
    return sum(item.quantity for item in items if _is_drinking_water(item))


def calculate_drinking_water_needed(
    daily_water_per_person: float,
    people_multiplier: float,
    supply_duration_days: int,
) -> float:
    return daily_water_per_person * people_multiplier * supply_duration_days


def calculate_water_requirements(
    items: Sequence[InventoryItem],
    recommended_items: Sequence[RecommendedItemDefinition] = (),
    total_water_available: Optional[float] = None,
) -> WaterRequirementResult:
    """
    Compare water needed for food preparation against water held.

    Args:
        items: All inventory items
        recommended_items: Catalog used to look up per-unit water needs
        total_water_available: Overrides the drinking water found in items

    Returns:
        WaterRequirementResult with per-item breakdown
    """
    requiring: List[WaterRequirementItem] = []

    for item in items:
        water_per_unit = get_water_requirement_per_unit(item, recommended_items)
        if water_per_unit > 0 and item.quantity > 0:
            requiring.append(WaterRequirementItem(
                item_id=item.id,
                item_name=item.name,
                quantity=item.quantity,
                water_per_unit=water_per_unit,
                total_water_required=water_per_unit * item.quantity,
            ))

    total_required = sum(r.total_water_required for r in requiring)
    if total_water_available is None:
        total_water_available = calculate_total_water_available(items)

    return WaterRequirementResult(
        total_water_required=total_required,
        total_water_available=total_water_available,
        has_enough_water=total_water_available >= total_required,
        water_shortfall=max(0.0, total_required - total_water_available),
        items_requiring_water=requiring,
    )
