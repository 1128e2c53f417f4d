"""Tests for per-item and same-type missing quantities."""

from datetime import timedelta

import pytest

from supplytracker.models.common import ItemStatus
from supplytracker.services.shortage_calculator import (
    calculate_missing_quantity,
    calculate_total_missing_quantity,
)
from supplytracker.services.status import calculate_item_status


class TestMissingQuantity:
    """Tests for a single item's missing quantity."""

    @pytest.mark.parametrize("quantity", [0, 1, 5, 9.5])
    def test_below_recommended(self, settings, make_item, quantity):
        item = make_item(quantity=quantity)
        assert calculate_missing_quantity(item, 10, settings=settings) == 10 - quantity

    @pytest.mark.parametrize("quantity", [10, 15])
    def test_at_or_above_recommended(self, settings, make_item, quantity):
        item = make_item(quantity=quantity)
        assert calculate_missing_quantity(item, 10, settings=settings) == 0

    def test_no_recommendation(self, settings, make_item):
        assert calculate_missing_quantity(make_item(quantity=0), 0, settings=settings) == 0

    def test_marked_as_enough(self, settings, make_item):
        item = make_item(quantity=1, marked_as_enough=True)
        assert calculate_missing_quantity(item, 10, settings=settings) == 0

    def test_expired_item_reports_nothing_missing(self, today, settings, make_item):
        item = make_item(quantity=1, never_expires=False, expiration_date=today - timedelta(days=1))
        assert calculate_missing_quantity(item, 10, today, settings) == 0

    def test_expiring_soon_is_warning_with_nothing_missing(self, today, settings, make_item):
        """Expiring in 10 days with far too little held."""
        item = make_item(quantity=1, never_expires=False, expiration_date=today + timedelta(days=10))

        assert calculate_item_status(item, 20, today, settings) == ItemStatus.WARNING
        assert calculate_missing_quantity(item, 20, today, settings) == 0


class TestTotalMissingQuantity:
    """Tests for missing quantity across items of one type."""

    def test_duplicates_share_aggregate(self, settings, make_item):
        """Two rope items holding 2 and 1 with 10 recommended both report 7."""
        first = make_item(item_type="rope", quantity=2)
        second = make_item(item_type="rope", quantity=1)
        items = [first, second, make_item(item_type="tape", quantity=0)]

        assert calculate_total_missing_quantity(first, items, 10, settings=settings) == 7
        assert calculate_total_missing_quantity(second, items, 10, settings=settings) == 7

    def test_marked_as_enough_covers_whole_type(self, settings, make_item):
        first = make_item(item_type="rope", quantity=0)
        second = make_item(item_type="rope", quantity=0, marked_as_enough=True)
        items = [first, second]

        assert calculate_total_missing_quantity(first, items, 10, settings=settings) == 0
        assert calculate_total_missing_quantity(second, items, 10, settings=settings) == 0

    def test_expiring_sibling_suppresses_missing(self, today, settings, make_item):
        first = make_item(item_type="rope", quantity=1)
        second = make_item(
            item_type="rope", quantity=1, never_expires=False,
            expiration_date=today + timedelta(days=3),
        )

        assert calculate_total_missing_quantity(first, [first, second], 10, today, settings) == 0

    def test_custom_item_falls_back_to_single_item(self, settings, make_item):
        custom = make_item(name="Rope", item_type="custom", quantity=3)
        other = make_item(name="Rope", item_type="custom", quantity=5)

        assert calculate_total_missing_quantity(custom, [custom, other], 10, settings=settings) == 7

    def test_never_negative(self, settings, make_item):
        item = make_item(item_type="rope", quantity=25)
        assert calculate_total_missing_quantity(item, [item], 10, settings=settings) == 0
