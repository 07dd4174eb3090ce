"""PV production, self-consumption and savings estimator.

Formula-based model calibrated against a reference simulator. The whole model
is driven by the generation-to-consumption ratio r = G / L:

1. Base autonomy (no battery): A0 = clamp(0, 1, a0 + b0 * r)
2. Battery uplift, bounded by the share of one day's load the battery can
   shift and by how much surplus generation is available to charge it:
   A = clamp(0, 1, A0 + d * min(1, beta) * clamp(0, 1, (r - t) / s))
3. Energy flows and money follow from A.

Self-consumed energy cannot exceed generation, so A0 is capped at r and the
battery-assisted A at the level where self-consumption plus battery losses
use up all generation. Neither cap is reached for realistically sized systems.
"""

import logging
import math

from pvsizer.core.constants import (
    AUTONOMY_A0,
    AUTONOMY_B0,
    BATTERY_ETA_RT,
    BATTERY_IMPACT_D,
    BATTERY_USABLE_RATIO,
    CHARGE_SCALE_S,
    CHARGE_THRESHOLD_T,
    DAYS_PER_YEAR,
    MONTHS_PER_YEAR,
    P_BUY_EUR_PER_KWH,
    P_SELL_EUR_PER_KWH,
    YEAR_KWH_PER_PANEL,
)
from pvsizer.core.schemas import CalculationResult
from pvsizer.core.validate import (
    InvalidInput,
    validate_inputs,
    validate_non_negative,
    validate_panel_count,
    validate_positive,
)

logger = logging.getLogger(__name__)


def clamp(lo: float, hi: float, x: float) -> float:
    """Clamp x between lo and hi."""
    return min(max(x, lo), hi)


def round_half_up(x: float, ndigits: int = 0) -> float:
    """Round to ndigits decimals, ties towards +inf."""
    factor = 10**ndigits
    return math.floor(x * factor + 0.5) / factor


def _round_int(x: float) -> int:
    return int(round_half_up(x))


def _require_finite(value: float, field: str, reason: str) -> None:
    if not math.isfinite(value):
        raise InvalidInput(field, reason)


def estimate_from_consumption(
    panel_count: int, annual_consumption_kwh: float, battery_capacity_kwh: float = 0.0
) -> CalculationResult:
    """Estimate the annual energy and money balance from consumption.

    Autonomy follows the calibrated regression except where it would
    self-consume more than the array generates (tiny arrays, or a large
    battery at r near 1). There the generation cap applies and the quoted
    autonomy and savings are lower than the raw regression.

    Args:
        panel_count: Number of panels
        annual_consumption_kwh: Annual consumption in kWh
        battery_capacity_kwh: Battery capacity in kWh (0 = no battery)

    Returns:
        CalculationResult

    Raises:
        InvalidInput: If any input violates its precondition, or is so
            extreme that a reported figure would overflow
    """
    inputs = validate_inputs(panel_count, annual_consumption_kwh, battery_capacity_kwh)

    # Generation
    G = inputs.panel_count * YEAR_KWH_PER_PANEL
    L = inputs.annual_consumption_kwh
    B = inputs.battery_capacity_kwh

    # Reported figures are scaled by up to 1000 before rounding
    _require_finite(G * 10, "panel_count", "is too large to report generation")
    _require_finite(L * 10, "annual_consumption_kwh", "is too large to report consumption")

    # Key ratio
    r = G / L
    _require_finite(r * 1000, "annual_consumption_kwh", "is too small relative to generation")

    # Base autonomy (without battery)
    A0 = clamp(0.0, min(1.0, r), AUTONOMY_A0 + AUTONOMY_B0 * r)

    # Autonomy with battery
    A = A0
    if B > 0:
        daily_load = L / DAYS_PER_YEAR
        usable = BATTERY_USABLE_RATIO * B
        beta = usable / daily_load
        charge = clamp(0.0, 1.0, (r - CHARGE_THRESHOLD_T) / CHARGE_SCALE_S)
        A = clamp(0.0, 1.0, A0 + BATTERY_IMPACT_D * min(1.0, beta) * charge)

        # Self-consumption plus battery losses cannot exceed generation
        k = 1 / BATTERY_ETA_RT - 1
        A = min(A, (r + k * A0) / (1 + k))

    # Energy flows
    e_self = A * L
    e_import = L - e_self

    # Battery losses and export
    e_shift = max(0.0, (A - A0) * L)
    loss = e_shift * (1 / BATTERY_ETA_RT - 1)
    e_export = max(0.0, G - e_self - loss)

    # Economics
    savings_eur = e_self * P_BUY_EUR_PER_KWH + e_export * P_SELL_EUR_PER_KWH
    bill_base = L * P_BUY_EUR_PER_KWH
    if bill_base <= 0:
        raise InvalidInput("annual_consumption_kwh", "is too small to price")
    savings_pct = savings_eur / bill_base * 100
    _require_finite(savings_pct * 10, "annual_consumption_kwh", "is too small relative to savings")

    logger.debug(
        "N=%d L=%.1f B=%.2f -> r=%.4f A0=%.4f A=%.4f import=%.1f",
        inputs.panel_count,
        L,
        B,
        r,
        A0,
        A,
        e_import,
    )

    # Rounded flows are derived from rounded totals so the balance identities
    # hold on the reported integers.
    self_kwh = _round_int(e_self)
    loss_kwh = _round_int(loss)

    return CalculationResult(
        generation_kwh_year=round_half_up(G, 1),
        consumption_kwh_year=round_half_up(L, 1),
        generation_ratio=round_half_up(r, 3),
        autonomy_pct=round_half_up(A * 100, 1),
        savings_eur_year=_round_int(savings_eur),
        savings_pct=round_half_up(savings_pct, 1),
        self_consumed_kwh_year=self_kwh,
        exported_kwh_year=max(0, _round_int(G) - self_kwh - loss_kwh) if e_export > 0 else 0,
        imported_kwh_year=_round_int(L) - self_kwh,
        battery_loss_kwh_year=loss_kwh,
    )


def estimate_from_annual_bill(
    panel_count: int, annual_bill_eur: float, battery_capacity_kwh: float = 0.0
) -> CalculationResult:
    """Estimate from an annual electricity bill in EUR.

    The bill is converted to consumption at the purchase tariff.
    """
    validate_panel_count(panel_count)
    bill = validate_positive(annual_bill_eur, "annual_bill_eur")
    validate_non_negative(battery_capacity_kwh, "battery_capacity_kwh")

    return estimate_from_consumption(panel_count, bill / P_BUY_EUR_PER_KWH, battery_capacity_kwh)


def estimate_from_monthly_bill(
    panel_count: int, monthly_bill_eur: float, battery_capacity_kwh: float = 0.0
) -> CalculationResult:
    """Estimate from a monthly electricity bill in EUR."""
    bill = validate_positive(monthly_bill_eur, "monthly_bill_eur")
    return estimate_from_annual_bill(panel_count, bill * MONTHS_PER_YEAR, battery_capacity_kwh)
