"""
Category Calculation Strategy Contract

Each strategy implements the same fixed set of capabilities. A registry
picks the strategy for a category; strategies do not inherit behavior from
each other and share code through strategies.common instead.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from supplytracker.config import Settings
from supplytracker.models.common import Unit
from supplytracker.models.household import CalculationOptions, HouseholdConfig
from supplytracker.models.inventory import InventoryItem, RecommendedItemDefinition
from supplytracker.models.shortages import ShortageCalculationResult


@dataclass(frozen=True)
class CalculationContext:
    """Inputs shared by every step of one category calculation."""
    category_id: str
    items: Sequence[InventoryItem]  # all items, for cross-category needs
    category_items: Sequence[InventoryItem]
    recommended_for_category: Sequence[RecommendedItemDefinition]  # enabled only
    household: HouseholdConfig
    disabled_recommended_items: Sequence[str]
    options: CalculationOptions  # fully resolved
    people_multiplier: float
    recommended_items: Sequence[RecommendedItemDefinition]  # whole catalog
    settings: Settings


@dataclass
class ActualQuantity:
    """What the household holds for one recommended item."""
    quantity: float
    calories: Optional[float] = None


@dataclass
class ItemCalculationResult:
    """Result of evaluating one recommended item."""
    definition: RecommendedItemDefinition
    recommended_qty: float
    actual_qty: float
    matching_items: List[InventoryItem] = field(default_factory=list)
    has_marked_as_enough: bool = False
    actual_calories: Optional[float] = None

    @property
    def unit(self) -> Unit:
        return self.definition.unit


class CategoryCalculationStrategy(ABC):
    """Category-specific calculation behavior."""

    strategy_id: str = ""

    # The catch-all strategy; a registry holds exactly one, last
    is_fallback: bool = False

    @abstractmethod
    def can_handle(self, category_id: str) -> bool:
        """True if this strategy should handle the category."""

    @abstractmethod
    def calculate_recommended_quantity(
        self,
        definition: RecommendedItemDefinition,
        context: CalculationContext,
    ) -> int:
        """Whole-number recommended quantity for one definition."""

    @abstractmethod
    def calculate_actual_quantity(
        self,
        matching_items: Sequence[InventoryItem],
        definition: RecommendedItemDefinition,
        context: CalculationContext,
    ) -> ActualQuantity:
        """Quantity (and calories, where relevant) held for one definition."""

    @abstractmethod
    def aggregate_totals(
        self,
        item_results: Sequence[ItemCalculationResult],
        context: CalculationContext,
    ) -> ShortageCalculationResult:
        """Combine per-definition results into category totals."""

    @abstractmethod
    def has_enough_inventory(self, result: ShortageCalculationResult) -> bool:
        """True if the category meets its requirements."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(strategy_id={self.strategy_id!r})"
