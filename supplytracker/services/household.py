"""
Household Calculations

Scaling factors for a household and the recommended quantity pipeline
shared by every category strategy.
"""

import math
from typing import Optional, Sequence

from supplytracker.config import Settings, get_settings
from supplytracker.models.household import CalculationOptions, HouseholdConfig
from supplytracker.models.inventory import InventoryItem, RecommendedItemDefinition

# Products like 0.7 * 10 land a hair above the integer in floating point
_CEIL_PRECISION = 9


def resolve_calculation_options(
    options: Optional[CalculationOptions] = None,
    settings: Optional[Settings] = None,
) -> CalculationOptions:
    """Fill unset options from settings."""
    settings = settings or get_settings()
    options = options or CalculationOptions()

    return CalculationOptions(
        children_multiplier=(
            options.children_multiplier
            if options.children_multiplier is not None
            else settings.children_multiplier
        ),
        daily_calories_per_person=(
            options.daily_calories_per_person
            if options.daily_calories_per_person is not None
            else settings.daily_calories_per_person
        ),
        daily_water_per_person=(
            options.daily_water_per_person
            if options.daily_water_per_person is not None
            else settings.daily_water_per_person
        ),
    )


def calculate_people_multiplier(
    household: HouseholdConfig,
    children_multiplier: Optional[float] = None,
    settings: Optional[Settings] = None,
) -> float:
    """Adults count as adult_multiplier each, children as children_multiplier."""
    settings = settings or get_settings()
    if children_multiplier is None:
        children_multiplier = settings.children_multiplier

    return (
        household.adults * settings.adult_multiplier
        + household.children * children_multiplier
    )


def calculate_household_multiplier(
    household: HouseholdConfig,
    children_multiplier: Optional[float] = None,
    settings: Optional[Settings] = None,
) -> float:
    """People multiplier over the whole supply duration (person-days)."""
    people = calculate_people_multiplier(household, children_multiplier, settings)
    return people * household.supply_duration_days


def apply_scaling(
    quantity: float,
    definition: RecommendedItemDefinition,
    household: HouseholdConfig,
    people_multiplier: float,
    settings: Optional[Settings] = None,
) -> float:
    """Apply a definition's people/pets/days scaling flags (no rounding)."""
    settings = settings or get_settings()

    if definition.scale_with_people:
        quantity *= people_multiplier

    if definition.scale_with_pets:
        quantity *= household.pets * settings.pet_multiplier

    if definition.scale_with_days:
        quantity *= household.supply_duration_days

    return quantity


def ceil_quantity(quantity: float) -> int:
    """Round a recommended quantity up to a whole number."""
    return math.ceil(round(quantity, _CEIL_PRECISION))


def calculate_recommended_quantity(
    definition: RecommendedItemDefinition,
    household: HouseholdConfig,
    people_multiplier: Optional[float] = None,
    base_quantity: Optional[float] = None,
    settings: Optional[Settings] = None,
) -> int:
    """
    Calculate the recommended quantity of an item for a household.

    Args:
        definition: The recommended item definition
        household: Household configuration
        people_multiplier: Pre-computed people multiplier (computed with default
            children multiplier when omitted)
        base_quantity: Replaces definition.base_quantity before scaling
        settings: Engine settings

    Returns:
        Whole-number recommended quantity; always 0 for a disabled household
    """
    if not household.enabled:
        return 0

    settings = settings or get_settings()
    if people_multiplier is None:
        people_multiplier = calculate_people_multiplier(household, settings=settings)

    qty = definition.base_quantity if base_quantity is None else base_quantity
    qty = apply_scaling(qty, definition, household, people_multiplier, settings)

    return ceil_quantity(qty)


def find_definition_for_item(
    item: InventoryItem,
    recommended_items: Sequence[RecommendedItemDefinition],
) -> Optional[RecommendedItemDefinition]:
    """Definition an item was created from (by type; custom items have none)."""
    if item.is_custom:
        return None
    for definition in recommended_items:
        if definition.id == item.item_type:
            return definition
    return None


def get_recommended_quantity_for_item(
    item: InventoryItem,
    household: HouseholdConfig,
    recommended_items: Sequence[RecommendedItemDefinition],
    children_multiplier: Optional[float] = None,
    settings: Optional[Settings] = None,
) -> int:
    """Recommended quantity for the definition behind an inventory item (0 if none)."""
    definition = find_definition_for_item(item, recommended_items)
    if definition is None:
        return 0

    people_multiplier = calculate_people_multiplier(household, children_multiplier, settings)
    return calculate_recommended_quantity(
        definition,
        household,
        people_multiplier=people_multiplier,
        settings=settings,
    )
