"""Pytest configuration and fixtures."""

from datetime import date
from typing import Callable, List

import pytest

from supplytracker.config import Settings
from supplytracker.models.common import Unit
from supplytracker.models.household import HouseholdConfig
from supplytracker.models.inventory import InventoryItem, RecommendedItemDefinition
from supplytracker.services.strategies.registry import StrategyRegistry, create_default_registry


@pytest.fixture
def settings() -> Settings:
    """Default settings, ignoring any local .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def today() -> date:
    return date(2025, 3, 1)


@pytest.fixture
def household() -> HouseholdConfig:
    """Two adults, three days."""
    return HouseholdConfig(adults=2, children=0, pets=0, supply_duration_days=3)


@pytest.fixture
def registry(settings) -> StrategyRegistry:
    return create_default_registry(settings)


@pytest.fixture
def make_definition() -> Callable[..., RecommendedItemDefinition]:
    """Factory for recommended item definitions."""
    def _make(
        id: str = "test-item",
        category: str = "tools-supplies",
        base_quantity: float = 1,
        unit: Unit = Unit.PIECES,
        scale_with_people: bool = False,
        scale_with_days: bool = False,
        **kwargs,
    ) -> RecommendedItemDefinition:
        return RecommendedItemDefinition(
            id=id,
            category=category,
            base_quantity=base_quantity,
            unit=unit,
            scale_with_people=scale_with_people,
            scale_with_days=scale_with_days,
            **kwargs,
        )
    return _make


@pytest.fixture
def make_item() -> Callable[..., InventoryItem]:
    """Factory for inventory items. item_type defaults to the name."""
    counter = {"n": 0}

    def _make(
        name: str = "test-item",
        category_id: str = "tools-supplies",
        quantity: float = 0,
        unit: Unit = Unit.PIECES,
        item_type: str = None,
        never_expires: bool = True,
        **kwargs,
    ) -> InventoryItem:
        counter["n"] += 1
        return InventoryItem(
            id=kwargs.pop("id", f"item-{counter['n']}"),
            name=name,
            item_type=item_type if item_type is not None else name,
            category_id=category_id,
            quantity=quantity,
            unit=unit,
            never_expires=never_expires,
            **kwargs,
        )
    return _make


@pytest.fixture
def catalog() -> List[RecommendedItemDefinition]:
    """A small recommended-item kit covering every strategy."""
    return [
        # Water
        RecommendedItemDefinition(
            id="bottled-water", category="water-beverages", base_quantity=3,
            unit=Unit.LITERS, scale_with_people=True, scale_with_days=True,
        ),
        RecommendedItemDefinition(
            id="long-life-juice", category="water-beverages", base_quantity=1,
            unit=Unit.LITERS, scale_with_people=True,
        ),
        # Food
        RecommendedItemDefinition(
            id="canned-fish", category="food", base_quantity=1, unit=Unit.CANS,
            scale_with_people=True, scale_with_days=True, calories_per_unit=200,
        ),
        RecommendedItemDefinition(
            id="rice", category="food", base_quantity=0.1, unit=Unit.KILOGRAMS,
            scale_with_people=True, scale_with_days=True,
            calories_per_100g=360, weight_grams_per_unit=1000,
            requires_water_liters=1.5,
        ),
        # Pets
        RecommendedItemDefinition(
            id="pet-food", category="pets", base_quantity=1, unit=Unit.CANS,
            scale_with_pets=True, scale_with_days=True,
        ),
        # Tools
        RecommendedItemDefinition(
            id="flashlight", category="tools-supplies", base_quantity=2, unit=Unit.PIECES,
        ),
        RecommendedItemDefinition(
            id="batteries", category="tools-supplies", base_quantity=10, unit=Unit.PIECES,
        ),
        # Mixed units
        RecommendedItemDefinition(
            id="bandages", category="medical-health", base_quantity=20, unit=Unit.PIECES,
        ),
        RecommendedItemDefinition(
            id="disinfectant", category="medical-health", base_quantity=1, unit=Unit.LITERS,
        ),
        # Communication
        RecommendedItemDefinition(
            id="battery-radio", category="communication-info", base_quantity=1, unit=Unit.PIECES,
        ),
        RecommendedItemDefinition(
            id="hand-crank-radio", category="communication-info", base_quantity=1, unit=Unit.PIECES,
        ),
    ]
