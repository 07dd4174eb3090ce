"""Test payback and monthly display metrics."""

import pytest

from pvsizer.core.constants import NOT_RECOVERABLE_YEARS
from pvsizer.core.estimator import estimate_from_annual_bill
from pvsizer.core.metrics import calculate_payback_years, to_monthly_figures
from pvsizer.core.schemas import CalculationResult
from pvsizer.core.validate import InvalidInput


@pytest.fixture
def reference_result():
    """10 panels, 1800 EUR/year, 7 kWh battery."""
    return estimate_from_annual_bill(10, 1800, 7)


def _result_with_savings(savings: int) -> CalculationResult:
    return CalculationResult(
        generation_kwh_year=100.0,
        consumption_kwh_year=100.0,
        generation_ratio=1.0,
        autonomy_pct=0.0,
        savings_eur_year=savings,
        savings_pct=0.0,
        self_consumed_kwh_year=0,
        exported_kwh_year=0,
        imported_kwh_year=100,
        battery_loss_kwh_year=0,
    )


def test_payback_rounds_to_whole_years(reference_result):
    """Test payback is price / annual savings rounded to a whole year."""
    price = 11510
    payback = calculate_payback_years(price, reference_result)

    assert isinstance(payback, int)
    assert payback == int(price / reference_result.savings_eur_year + 0.5)


def test_payback_half_year_rounds_up():
    """Test exact half years round up."""
    assert calculate_payback_years(2500, _result_with_savings(1000)) == 3
    assert calculate_payback_years(2400, _result_with_savings(1000)) == 2


@pytest.mark.parametrize("savings", [0, -10])
def test_payback_sentinel_when_nothing_saved(savings):
    """Test non-positive savings report the not-recoverable sentinel."""
    assert calculate_payback_years(5000, _result_with_savings(savings)) == NOT_RECOVERABLE_YEARS


def test_payback_zero_price(reference_result):
    """Test a free system pays back immediately."""
    assert calculate_payback_years(0, reference_result) == 0


def test_payback_rejects_negative_price(reference_result):
    """Test a negative price is invalid."""
    with pytest.raises(InvalidInput) as exc_info:
        calculate_payback_years(-1, reference_result)

    assert exc_info.value.field == "system_price_eur"


def test_monthly_figures_are_annual_over_twelve(reference_result):
    """Test monthly figures divide annual figures evenly."""
    monthly = to_monthly_figures(reference_result)

    assert abs(monthly.savings_eur_month - reference_result.savings_eur_year / 12) <= 0.5
    assert abs(monthly.self_consumed_kwh_month - reference_result.self_consumed_kwh_year / 12) <= 0.5
    assert abs(monthly.exported_kwh_month - reference_result.exported_kwh_year / 12) <= 0.5
    assert abs(monthly.imported_kwh_month - reference_result.imported_kwh_year / 12) <= 0.5


def test_monthly_figures_are_integers(reference_result):
    """Test monthly figures are whole numbers."""
    monthly = to_monthly_figures(reference_result)

    for value in monthly.model_dump().values():
        assert isinstance(value, int)


def test_monthly_figures_half_rounds_up():
    """Test 6 EUR/year rounds to 1 EUR/month."""
    monthly = to_monthly_figures(_result_with_savings(6))

    assert monthly.savings_eur_month == 1
    assert monthly.imported_kwh_month == 8
