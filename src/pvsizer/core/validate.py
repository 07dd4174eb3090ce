"""Input validation for the estimator."""

import math
import numbers

from pvsizer.core.schemas import CalculationInput


class InvalidInput(ValueError):
    """Raised when an estimator input violates its precondition.

    Attributes:
        field: Name of the offending parameter
        reason: Violated constraint
    """

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"{field}: {reason}")


def _as_finite_number(value, field: str) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidInput(field, f"must be a number, got {type(value).__name__}")
    try:
        finite = math.isfinite(value)
    except OverflowError:
        raise InvalidInput(field, "is too large") from None
    if not finite:
        raise InvalidInput(field, f"must be finite, got {value}")
    return float(value)


def validate_panel_count(panel_count, field: str = "panel_count") -> int:
    """Validate a panel count.

    Args:
        panel_count: Number of panels
        field: Name reported on failure

    Returns:
        Panel count as int

    Raises:
        InvalidInput: If not a positive whole number
    """
    value = _as_finite_number(panel_count, field)
    if value != int(value):
        raise InvalidInput(field, f"must be a whole number, got {panel_count}")
    if value <= 0:
        raise InvalidInput(field, f"must be greater than 0, got {panel_count}")
    return int(value)


def validate_positive(value, field: str) -> float:
    """Validate a strictly positive finite quantity (consumption, bill)."""
    number = _as_finite_number(value, field)
    if number <= 0:
        raise InvalidInput(field, f"must be greater than 0, got {value}")
    return number


def validate_non_negative(value, field: str) -> float:
    """Validate a non-negative finite quantity (battery capacity, price)."""
    number = _as_finite_number(value, field)
    if number < 0:
        raise InvalidInput(field, f"cannot be negative, got {value}")
    return number


def validate_inputs(
    panel_count, annual_consumption_kwh, battery_capacity_kwh
) -> CalculationInput:
    """Validate estimator inputs.

    Args:
        panel_count: Number of panels
        annual_consumption_kwh: Annual consumption in kWh
        battery_capacity_kwh: Battery capacity in kWh (0 = no battery)

    Returns:
        Validated CalculationInput

    Raises:
        InvalidInput: On the first violated precondition
    """
    return CalculationInput(
        panel_count=validate_panel_count(panel_count),
        annual_consumption_kwh=validate_positive(annual_consumption_kwh, "annual_consumption_kwh"),
        battery_capacity_kwh=validate_non_negative(battery_capacity_kwh, "battery_capacity_kwh"),
    )
