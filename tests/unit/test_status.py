"""Tests for expiration and status calculation."""

from datetime import timedelta

import pytest

from supplytracker.models.common import ItemStatus
from supplytracker.services.status import (
    calculate_item_status,
    days_until_expiration,
    get_item_status,
    get_status_from_percentage,
    get_status_from_score,
    has_expiration_issue,
    is_expiring_soon,
    is_item_expired,
)


class TestExpiration:
    """Tests for expiration date helpers."""

    def test_days_until_expiration(self, today):
        assert days_until_expiration(today + timedelta(days=10), today=today) == 10
        assert days_until_expiration(today - timedelta(days=1), today=today) == -1

    def test_never_expires(self, today):
        assert days_until_expiration(today, never_expires=True, today=today) is None
        assert days_until_expiration(None, today=today) is None

    def test_expired(self, today):
        assert is_item_expired(today - timedelta(days=1), today=today)
        assert not is_item_expired(today, today=today)

    def test_expiring_soon_window(self, today):
        assert is_expiring_soon(today, today=today, threshold_days=30)
        assert is_expiring_soon(today + timedelta(days=30), today=today, threshold_days=30)
        assert not is_expiring_soon(today + timedelta(days=31), today=today, threshold_days=30)
        assert not is_expiring_soon(today - timedelta(days=1), today=today, threshold_days=30)

    def test_expiration_issue(self, today, settings, make_item):
        soon = make_item(never_expires=False, expiration_date=today + timedelta(days=5))
        later = make_item(never_expires=False, expiration_date=today + timedelta(days=90))
        expired = make_item(never_expires=False, expiration_date=today - timedelta(days=5))

        assert has_expiration_issue(soon, today, settings)
        assert has_expiration_issue(expired, today, settings)
        assert not has_expiration_issue(later, today, settings)


class TestItemStatus:
    """Tests for item status precedence."""

    def test_expired_plentiful_item_is_critical(self, today, settings):
        status = get_item_status(
            100, 10, expiration_date=today - timedelta(days=1), today=today, settings=settings
        )
        assert status == ItemStatus.CRITICAL

    def test_expiring_soon_is_warning(self, today, settings):
        status = get_item_status(
            1, 20, expiration_date=today + timedelta(days=10), today=today, settings=settings
        )
        assert status == ItemStatus.WARNING

    def test_marked_as_enough_is_ok(self, settings):
        assert get_item_status(0, 10, marked_as_enough=True, settings=settings) == ItemStatus.OK

    def test_marked_as_enough_does_not_hide_expiration(self, today, settings):
        status = get_item_status(
            0, 10,
            expiration_date=today - timedelta(days=2),
            marked_as_enough=True,
            today=today,
            settings=settings,
        )
        assert status == ItemStatus.CRITICAL

    @pytest.mark.parametrize("quantity,expected", [
        (0, ItemStatus.CRITICAL),
        (4, ItemStatus.WARNING),
        (5, ItemStatus.OK),
        (12, ItemStatus.OK),
    ])
    def test_quantity_buckets(self, settings, quantity, expected):
        assert get_item_status(quantity, 10, settings=settings) == expected

    def test_calculate_item_status_uses_item_fields(self, today, settings, make_item):
        item = make_item(quantity=50, never_expires=False, expiration_date=today - timedelta(days=3))
        assert calculate_item_status(item, 10, today, settings) == ItemStatus.CRITICAL


class TestThresholdStatus:
    """Tests for percentage and score buckets."""

    @pytest.mark.parametrize("percentage,expected", [
        (0, ItemStatus.CRITICAL),
        (29, ItemStatus.CRITICAL),
        (30, ItemStatus.WARNING),
        (69, ItemStatus.WARNING),
        (70, ItemStatus.OK),
    ])
    def test_from_percentage(self, settings, percentage, expected):
        assert get_status_from_percentage(percentage, settings) == expected

    @pytest.mark.parametrize("score,expected", [
        (80, ItemStatus.OK),
        (79, ItemStatus.WARNING),
        (50, ItemStatus.WARNING),
        (49, ItemStatus.CRITICAL),
    ])
    def test_from_score(self, settings, score, expected):
        assert get_status_from_score(score, settings) == expected
