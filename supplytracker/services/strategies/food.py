"""
Food Category Strategy

Food completeness is measured in calories, not quantities: the household
needs daily calories x people x days. Quantity totals and shortages are
still produced for display but do not decide completeness.
"""

import logging
from typing import Iterable, Optional, Sequence

from supplytracker.models.common import FOOD_CATEGORY_ID
from supplytracker.models.inventory import InventoryItem, RecommendedItemDefinition
from supplytracker.models.shortages import ShortageCalculationResult
from supplytracker.services.calories import calculate_item_calories
from supplytracker.services.strategies.base import (
    ActualQuantity,
    CalculationContext,
    CategoryCalculationStrategy,
    ItemCalculationResult,
)
from supplytracker.services.strategies.common import (
    aggregate_standard_totals,
    calculate_base_recommended_quantity,
    sum_quantities,
)

logger = logging.getLogger(__name__)


class FoodCategoryStrategy(CategoryCalculationStrategy):
    """Calorie-based strategy for food categories."""

    strategy_id = "food"

    def __init__(self, category_ids: Optional[Iterable[str]] = None):
        self.category_ids = frozenset(category_ids or [FOOD_CATEGORY_ID])

    def can_handle(self, category_id: str) -> bool:
        return category_id in self.category_ids

    def calculate_recommended_quantity(
        self,
        definition: RecommendedItemDefinition,
        context: CalculationContext,
    ) -> int:
        return calculate_base_recommended_quantity(definition, context)

    def calculate_actual_quantity(
        self,
        matching_items: Sequence[InventoryItem],
        definition: RecommendedItemDefinition,
        context: CalculationContext,
    ) -> ActualQuantity:
        calories = sum(calculate_item_calories(item, definition) for item in matching_items)
        return ActualQuantity(quantity=sum_quantities(matching_items), calories=calories)

    def aggregate_totals(
        self,
        item_results: Sequence[ItemCalculationResult],
        context: CalculationContext,
    ) -> ShortageCalculationResult:
        result = aggregate_standard_totals(item_results)

        needed_calories = (
            context.options.daily_calories_per_person
            * context.people_multiplier
            * context.household.supply_duration_days
        )
        actual_calories = sum(r.actual_calories or 0 for r in item_results)
        actual_calories += self._unmatched_calories(item_results, context)

        result.total_actual_calories = actual_calories
        result.total_needed_calories = needed_calories
        result.missing_calories = max(0, needed_calories - actual_calories)
        return result

    def _unmatched_calories(
        self,
        item_results: Sequence[ItemCalculationResult],
        context: CalculationContext,
    ) -> float:
        """
        Calories from category items no evaluated definition claimed.

        Covers custom food with its own rate and items whose definition is
        disabled (or has no requirement for this household); those count
        toward calories with the definition's rate but never toward its
        quantity requirement.
        """
        counted = {r.definition.id for r in item_results}
        catalog = {d.id: d for d in context.recommended_items}

        calories = 0.0
        for item in context.category_items:
            if not item.is_custom and item.item_type in counted:
                continue
            definition = None if item.is_custom else catalog.get(item.item_type)
            calories += calculate_item_calories(item, definition)

        if calories:
            logger.debug(f"Counted {calories:.0f} kcal from unmatched items in {context.category_id}")
        return calories

    def has_enough_inventory(self, result: ShortageCalculationResult) -> bool:
        """Calories only."""
        needed = result.total_needed_calories or 0
        if needed == 0:
            return False
        return (result.total_actual_calories or 0) >= needed
