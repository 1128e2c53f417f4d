"""
Calorie Calculations

Mass <-> discrete-unit conversion for calorie totals. Calorie rates are
per discrete unit (one can, one package); items stored by mass (kilograms)
are first converted to a unit count using the weight of one unit.
"""

from typing import Optional

from supplytracker.models.common import Unit
from supplytracker.models.inventory import InventoryItem, RecommendedItemDefinition

GRAMS_PER_KILOGRAM = 1000
CALORIE_BASE_WEIGHT_GRAMS = 100  # caloriesPer100g reference weight


def calculate_calories_from_weight(weight_grams: float, calories_per_100g: float) -> float:
    """Calories of one unit from its weight and the per-100 g rate."""
    return weight_grams / CALORIE_BASE_WEIGHT_GRAMS * calories_per_100g


def requires_mass_conversion(unit: Unit, weight_grams_per_unit: Optional[float]) -> bool:
    """Quantity is a mass but the calorie rate is per unit."""
    return unit == Unit.KILOGRAMS and bool(weight_grams_per_unit) and weight_grams_per_unit > 0


def units_from_mass(quantity_kg: float, weight_grams_per_unit: float) -> float:
    """Number of discrete units in a mass given in kilograms."""
    return quantity_kg * GRAMS_PER_KILOGRAM / weight_grams_per_unit


def calculate_total_calories(
    quantity: float,
    calories_per_unit: float,
    unit: Optional[Unit] = None,
    weight_grams_per_unit: Optional[float] = None,
) -> float:
    """
    Total calories for a quantity of a food.

    Args:
        quantity: Amount held, in `unit`
        calories_per_unit: Calories of one discrete unit
        unit: Unit the quantity is stored in
        weight_grams_per_unit: Weight of one unit, needed when unit is kilograms

    Returns:
        Total calories (unrounded)
    """
    if unit is not None and requires_mass_conversion(unit, weight_grams_per_unit):
        return units_from_mass(quantity, weight_grams_per_unit) * calories_per_unit
    return quantity * calories_per_unit


def get_definition_calories_per_unit(
    definition: RecommendedItemDefinition,
) -> Optional[float]:
    """
    Calories per unit for a recommended item.

    Derived from weight and caloriesPer100g when both are known, otherwise
    the direct calories_per_unit value.
    """
    if definition.weight_grams_per_unit and definition.calories_per_100g:
        return calculate_calories_from_weight(
            definition.weight_grams_per_unit,
            definition.calories_per_100g,
        )
    return definition.calories_per_unit


def calculate_item_calories(
    item: InventoryItem,
    definition: Optional[RecommendedItemDefinition] = None,
) -> float:
    """
    Calories held in one inventory item.

    The item's own rate wins; the definition's rate is the fallback. The
    weight of one unit likewise comes from the item, else the definition.
    No rate at all means no calorie contribution.
    """
    rate = item.calories_per_unit
    if rate is None and definition is not None:
        rate = get_definition_calories_per_unit(definition)
    if not rate:
        return 0.0

    weight = item.weight_grams
    if weight is None and definition is not None:
        weight = definition.weight_grams_per_unit

    return calculate_total_calories(item.quantity, rate, item.unit, weight)
