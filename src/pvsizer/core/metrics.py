"""Display metrics derived from an estimator result."""

from pvsizer.core.constants import MONTHS_PER_YEAR, NOT_RECOVERABLE_YEARS
from pvsizer.core.estimator import round_half_up
from pvsizer.core.schemas import CalculationResult, MonthlyFigures
from pvsizer.core.validate import validate_non_negative


def calculate_payback_years(system_price_eur: float, result: CalculationResult) -> int:
    """Compute the simple payback period.

    Args:
        system_price_eur: Total installed price in EUR
        result: Estimator result for the system

    Returns:
        Whole years until savings repay the price, or NOT_RECOVERABLE_YEARS
        when the system saves nothing

    Raises:
        InvalidInput: If the price is negative or not finite
    """
    price = validate_non_negative(system_price_eur, "system_price_eur")
    if result.savings_eur_year <= 0:
        return NOT_RECOVERABLE_YEARS
    return int(round_half_up(price / result.savings_eur_year))


def to_monthly_figures(result: CalculationResult) -> MonthlyFigures:
    """Spread annual figures evenly over twelve months.

    No seasonal shaping is applied.
    """

    def per_month(value: float) -> int:
        return int(round_half_up(value / MONTHS_PER_YEAR))

    return MonthlyFigures(
        savings_eur_month=per_month(result.savings_eur_year),
        self_consumed_kwh_month=per_month(result.self_consumed_kwh_year),
        exported_kwh_month=per_month(result.exported_kwh_year),
        imported_kwh_month=per_month(result.imported_kwh_year),
    )
