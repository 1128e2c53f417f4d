"""Tests for category status summaries."""

from datetime import timedelta

from supplytracker.models.common import ItemStatus, Unit
from supplytracker.models.household import HouseholdConfig
from supplytracker.models.shortages import ShortageCalculationResult
from supplytracker.services.category_status import (
    build_calculation_context,
    calculate_all_category_statuses,
    calculate_category_shortages,
    calculate_category_status,
    calculate_completion_percentage,
    has_enough_inventory,
)


class TestCalculationContext:
    """Tests for context construction."""

    def test_filters_category_and_disabled(self, settings, catalog, household, make_item):
        items = [
            make_item(item_type="flashlight", quantity=1),
            make_item(item_type="rice", category_id="food", unit=Unit.KILOGRAMS, quantity=1),
        ]

        context = build_calculation_context(
            "tools-supplies", items, household, catalog,
            disabled_recommended_items=["batteries"],
            settings=settings,
        )

        assert [i.item_type for i in context.category_items] == ["flashlight"]
        assert [d.id for d in context.recommended_for_category] == ["flashlight"]
        assert context.people_multiplier == 2.0
        assert len(context.items) == 2


class TestCategoryShortages:
    """Tests for the shortage entry point."""

    def test_no_definitions_gives_empty_result(self, settings, catalog, household, make_item, registry):
        items = [make_item(category_id="hobbies", quantity=3)]

        result = calculate_category_shortages(
            "hobbies", items, household, catalog, registry=registry, settings=settings
        )

        assert result == ShortageCalculationResult()

    def test_disabled_household_gives_empty_result(self, settings, catalog, registry):
        household = HouseholdConfig(adults=2, supply_duration_days=3, enabled=False)

        result = calculate_category_shortages(
            "food", [], household, catalog, registry=registry, settings=settings
        )

        assert result.total_needed == 0
        assert result.total_needed_calories is None

    def test_zero_recommendation_is_skipped(self, settings, catalog, household, registry):
        """Pet food without pets is not a requirement."""
        result = calculate_category_shortages(
            "pets", [], household, catalog, registry=registry, settings=settings
        )

        assert result.total_needed == 0
        assert result.shortages == []

    def test_name_only_match_does_not_count(self, settings, catalog, household, make_item, registry):
        """Category aggregation matches by type only."""
        items = [make_item(name="Flashlight", item_type="custom", quantity=2)]

        result = calculate_category_shortages(
            "tools-supplies", items, household, catalog, registry=registry, settings=settings
        )

        assert result.total_actual == 0

    def test_has_enough_inventory(self, registry):
        result = ShortageCalculationResult(total_actual=3, total_needed=3)
        assert has_enough_inventory("tools-supplies", result, registry)


class TestCompletionPercentage:
    """Tests for completion percentage."""

    def test_without_recommendations(self):
        result = ShortageCalculationResult()
        assert calculate_completion_percentage(result, False, 2) == 100
        assert calculate_completion_percentage(result, False, 0) == 0

    def test_calories_win_over_quantities(self):
        result = ShortageCalculationResult(
            total_actual=10, total_needed=10,
            total_actual_calories=3600, total_needed_calories=6000,
        )
        assert calculate_completion_percentage(result, True, 1) == 60

    def test_quantity_ratio(self):
        result = ShortageCalculationResult(total_actual=1, total_needed=4)
        assert calculate_completion_percentage(result, True, 1) == 25


class TestCategoryStatus:
    """Tests for the category status summary."""

    def test_food_below_calories(self, settings, catalog, make_item, registry):
        household = HouseholdConfig(adults=1, supply_duration_days=3)
        items = [make_item(item_type="rice", category_id="food", unit=Unit.KILOGRAMS, quantity=1)]

        summary = calculate_category_status(
            "food", items, household, catalog, registry=registry, settings=settings
        )

        assert summary.completion_percentage == 60
        assert summary.status == ItemStatus.WARNING
        assert summary.total_needed_calories == 6000

    def test_enough_is_ok_and_full(self, settings, catalog, household, make_item, registry):
        items = [
            make_item(item_type="flashlight", quantity=5),
            make_item(item_type="batteries", quantity=10),
        ]

        summary = calculate_category_status(
            "tools-supplies", items, household, catalog, registry=registry, settings=settings
        )

        assert summary.status == ItemStatus.OK
        assert summary.completion_percentage == 100
        assert summary.ok_count == 2

    def test_expired_item_makes_category_critical(self, today, settings, catalog, household, make_item, registry):
        items = [
            make_item(item_type="flashlight", quantity=2),
            make_item(item_type="batteries", quantity=9, never_expires=False,
                      expiration_date=today - timedelta(days=1)),
        ]

        summary = calculate_category_status(
            "tools-supplies", items, household, catalog,
            registry=registry, settings=settings, today=today,
        )

        assert summary.critical_count == 1
        assert summary.status == ItemStatus.CRITICAL
        assert summary.completion_percentage == 92

    def test_empty_category(self, settings, catalog, household, registry):
        summary = calculate_category_status(
            "tools-supplies", [], household, catalog, registry=registry, settings=settings
        )

        assert summary.item_count == 0
        assert summary.completion_percentage == 0
        assert summary.status == ItemStatus.CRITICAL

    def test_category_without_recommendations(self, settings, catalog, household, make_item, registry):
        items = [make_item(category_id="hobbies", item_type="custom", quantity=1)]

        summary = calculate_category_status(
            "hobbies", items, household, catalog, registry=registry, settings=settings
        )

        assert not summary.has_recommendations
        assert summary.completion_percentage == 100
        assert summary.status == ItemStatus.OK

    def test_empty_catalog_plain_category_is_ok(self, settings, household, make_item, registry):
        items = [make_item(category_id="tools-supplies", item_type="custom", quantity=0)]

        summary = calculate_category_status(
            "tools-supplies", items, household, [], registry=registry, settings=settings
        )

        assert summary.status == ItemStatus.OK

    def test_all_categories_in_order(self, settings, catalog, household, registry):
        summaries = calculate_all_category_statuses(
            ["food", "water-beverages", "tools-supplies"], [], household, catalog,
            registry=registry, settings=settings,
        )

        assert [s.category_id for s in summaries] == ["food", "water-beverages", "tools-supplies"]
