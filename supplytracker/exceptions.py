"""Exceptions raised by the calculation engine."""

from typing import Any, Dict


class SupplyTrackerError(Exception):
    """Base class for engine errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: Dict[str, Any] = None
    ):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class StrategyRegistryError(SupplyTrackerError):
    """Registry composition is invalid (fallback missing, duplicated or misplaced)."""

    def __init__(self, message: str, details: Dict[str, Any] = None):
        super().__init__(
            code="INVALID_REGISTRY",
            message=message,
            details=details or {}
        )


class StrategyNotFoundError(SupplyTrackerError):
    """No registered strategy handles a category."""

    def __init__(self, category_id: str):
        super().__init__(
            code="STRATEGY_NOT_FOUND",
            message=f"No strategy found for category: {category_id}",
            details={"category_id": category_id}
        )
