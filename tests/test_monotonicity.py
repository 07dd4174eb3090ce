"""Test autonomy and savings respond monotonically to system size and load."""

import numpy as np
import pytest

from pvsizer.core.estimator import estimate_from_annual_bill, estimate_from_consumption

BILLS = [600, 1200, 1800, 2600, 4000]
BATTERIES = [0.0, 5.0, 10.0, 16.0]


def _series(values, attr):
    return np.array([getattr(v, attr) for v in values])


@pytest.mark.parametrize("bill", BILLS)
@pytest.mark.parametrize("battery", BATTERIES)
def test_more_panels_never_hurt(bill, battery):
    """Test autonomy and savings are non-decreasing in panel count."""
    results = [estimate_from_annual_bill(n, bill, battery) for n in range(1, 41)]

    assert (np.diff(_series(results, "autonomy_pct")) >= 0).all()
    assert (np.diff(_series(results, "savings_eur_year")) >= 0).all()


@pytest.mark.parametrize("panels", [4, 6, 10, 14, 20])
@pytest.mark.parametrize("bill", BILLS)
def test_bigger_battery_never_hurts(panels, bill):
    """Test autonomy and savings are non-decreasing in battery capacity."""
    sizes = np.linspace(0, 30, 61)
    results = [estimate_from_annual_bill(panels, bill, float(b)) for b in sizes]

    assert (np.diff(_series(results, "autonomy_pct")) >= 0).all()
    assert (np.diff(_series(results, "savings_eur_year")) >= 0).all()


@pytest.mark.parametrize("panels", [4, 10, 14, 20])
@pytest.mark.parametrize("battery", BATTERIES)
def test_higher_consumption_never_raises_autonomy(panels, battery):
    """Test autonomy is non-increasing in consumption."""
    loads = np.geomspace(1000, 50000, 60)
    results = [estimate_from_consumption(panels, float(load), battery) for load in loads]

    assert (np.diff(_series(results, "autonomy_pct")) <= 0).all()


def test_autonomy_strictly_increases_with_panels():
    """Test realistic systems gain autonomy from every size step."""
    r6 = estimate_from_annual_bill(6, 1800, 0)
    r10 = estimate_from_annual_bill(10, 1800, 0)
    r14 = estimate_from_annual_bill(14, 1800, 0)

    assert r10.autonomy_pct > r6.autonomy_pct
    assert r14.autonomy_pct > r10.autonomy_pct
    assert r10.savings_eur_year > r6.savings_eur_year
    assert r14.savings_eur_year > r10.savings_eur_year


def test_autonomy_strictly_increases_with_battery():
    """Test each battery step adds autonomy for a reference household."""
    none = estimate_from_annual_bill(10, 1800, 0)
    small = estimate_from_annual_bill(10, 1800, 5)
    large = estimate_from_annual_bill(10, 1800, 10)

    assert small.autonomy_pct > none.autonomy_pct
    assert large.autonomy_pct > small.autonomy_pct
    assert small.savings_eur_year > none.savings_eur_year


def test_autonomy_strictly_decreases_with_bill():
    """Test larger bills are covered less by the same system."""
    low = estimate_from_annual_bill(10, 1200, 0)
    mid = estimate_from_annual_bill(10, 1800, 0)
    high = estimate_from_annual_bill(10, 2400, 0)

    assert low.autonomy_pct > mid.autonomy_pct > high.autonomy_pct
