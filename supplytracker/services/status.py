"""
Status Calculations

Expiration-aware item status and threshold buckets for category and
dashboard views. Expiration always takes precedence over quantity.

Dates are calendar dates (datetime.date), so day differences never shift
with the time of day or timezone.
"""

from datetime import date
from typing import Optional

from supplytracker.config import Settings, get_settings
from supplytracker.models.common import ItemStatus
from supplytracker.models.inventory import InventoryItem


def days_until_expiration(
    expiration_date: Optional[date],
    never_expires: bool = False,
    today: Optional[date] = None,
) -> Optional[int]:
    """Days from today to the expiration date; None if the item does not expire."""
    if never_expires or expiration_date is None:
        return None
    today = today or date.today()
    return (expiration_date - today).days


def is_item_expired(
    expiration_date: Optional[date],
    never_expires: bool = False,
    today: Optional[date] = None,
) -> bool:
    days = days_until_expiration(expiration_date, never_expires, today)
    return days is not None and days < 0


def is_expiring_soon(
    expiration_date: Optional[date],
    never_expires: bool = False,
    today: Optional[date] = None,
    threshold_days: Optional[int] = None,
) -> bool:
    """Not yet expired, but within the expiring-soon window."""
    if threshold_days is None:
        threshold_days = get_settings().expiring_soon_days
    days = days_until_expiration(expiration_date, never_expires, today)
    return days is not None and 0 <= days <= threshold_days


def has_expiration_issue(
    item: InventoryItem,
    today: Optional[date] = None,
    settings: Optional[Settings] = None,
) -> bool:
    """Expired or expiring soon."""
    settings = settings or get_settings()
    days = days_until_expiration(item.expiration_date, item.never_expires, today)
    return days is not None and days <= settings.expiring_soon_days


def get_item_status(
    quantity: float,
    recommended_quantity: float,
    expiration_date: Optional[date] = None,
    never_expires: bool = False,
    marked_as_enough: bool = False,
    today: Optional[date] = None,
    settings: Optional[Settings] = None,
) -> ItemStatus:
    """
    Status of a single item from its expiration and quantity.

    Order of checks:
        1. expired -> critical, expiring soon -> warning
        2. marked as enough -> ok
        3. nothing held -> critical, below warning ratio -> warning
        4. ok
    """
    settings = settings or get_settings()

    days = days_until_expiration(expiration_date, never_expires, today)
    if days is not None:
        if days < 0:
            return ItemStatus.CRITICAL
        if days <= settings.expiring_soon_days:
            return ItemStatus.WARNING

    if marked_as_enough:
        return ItemStatus.OK

    if quantity == 0:
        return ItemStatus.CRITICAL
    if quantity < recommended_quantity * settings.low_quantity_warning_ratio:
        return ItemStatus.WARNING

    return ItemStatus.OK


def calculate_item_status(
    item: InventoryItem,
    recommended_quantity: float,
    today: Optional[date] = None,
    settings: Optional[Settings] = None,
) -> ItemStatus:
    return get_item_status(
        item.quantity,
        recommended_quantity,
        expiration_date=item.expiration_date,
        never_expires=item.never_expires,
        marked_as_enough=item.marked_as_enough,
        today=today,
        settings=settings,
    )


def get_status_from_percentage(
    percentage: float,
    settings: Optional[Settings] = None,
) -> ItemStatus:
    """Category-level status from a completion percentage."""
    settings = settings or get_settings()
    if percentage < settings.critical_percentage_threshold:
        return ItemStatus.CRITICAL
    if percentage < settings.warning_percentage_threshold:
        return ItemStatus.WARNING
    return ItemStatus.OK


def get_status_from_score(
    score: float,
    settings: Optional[Settings] = None,
) -> ItemStatus:
    """Dashboard status from a preparedness score."""
    settings = settings or get_settings()
    if score >= settings.ok_score_threshold:
        return ItemStatus.OK
    if score >= settings.warning_score_threshold:
        return ItemStatus.WARNING
    return ItemStatus.CRITICAL
