"""
Water Category Strategy

Bottled water is sized from the daily water setting rather than the
catalog base quantity, and grows by the water needed to prepare stored
food. Drinking and preparation water are reported separately.
"""

from typing import Sequence

from supplytracker.models.common import BOTTLED_WATER_ID, WATER_CATEGORY_ID
from supplytracker.models.inventory import InventoryItem, RecommendedItemDefinition
from supplytracker.models.shortages import ShortageCalculationResult
from supplytracker.services.household import apply_scaling, ceil_quantity
from supplytracker.services.strategies.base import (
    ActualQuantity,
    CalculationContext,
    CategoryCalculationStrategy,
    ItemCalculationResult,
)
from supplytracker.services.strategies.common import (
    aggregate_standard_totals,
    calculate_base_recommended_quantity,
    default_has_enough_inventory,
    sum_quantities,
)
from supplytracker.services.water import (
    calculate_drinking_water_needed,
    calculate_total_water_required,
)


class WaterCategoryStrategy(CategoryCalculationStrategy):
    """Volume-based strategy for the water-beverages category."""

    strategy_id = "water-beverages"

    def can_handle(self, category_id: str) -> bool:
        return category_id == WATER_CATEGORY_ID

    def calculate_recommended_quantity(
        self,
        definition: RecommendedItemDefinition,
        context: CalculationContext,
    ) -> int:
        if definition.id != BOTTLED_WATER_ID:
            return calculate_base_recommended_quantity(definition, context)

        if not context.household.enabled:
            return 0

        qty = apply_scaling(
            context.options.daily_water_per_person,
            definition,
            context.household,
            context.people_multiplier,
            context.settings,
        )
        qty += calculate_total_water_required(context.items, context.recommended_items)

        return ceil_quantity(qty)

    def calculate_actual_quantity(
        self,
        matching_items: Sequence[InventoryItem],
        definition: RecommendedItemDefinition,
        context: CalculationContext,
    ) -> ActualQuantity:
        return ActualQuantity(quantity=sum_quantities(matching_items))

    def aggregate_totals(
        self,
        item_results: Sequence[ItemCalculationResult],
        context: CalculationContext,
    ) -> ShortageCalculationResult:
        result = aggregate_standard_totals(item_results)

        result.drinking_water_needed = calculate_drinking_water_needed(
            context.options.daily_water_per_person,
            context.people_multiplier,
            context.household.supply_duration_days,
        )
        # Unceiled, for display
        result.preparation_water_needed = calculate_total_water_required(
            context.items,
            context.recommended_items,
        )
        return result

    def has_enough_inventory(self, result: ShortageCalculationResult) -> bool:
        return default_has_enough_inventory(result)
