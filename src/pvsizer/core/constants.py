"""Calibration constants, units, and result field names.

CALIBRATION (Portugal, 600 W panels):
- Tariffs are flat: one purchase price and one feed-in price.
- Generation is a fixed yearly yield per panel derived from the reference
  simulator's daily average for a 10-panel system.
- Autonomy is an empirical regression on the generation-to-consumption ratio
  r = G / L. The five coefficients are fitted values and must not be altered.

UNITS:
- Energy: kWh (annual unless the name says otherwise)
- Battery capacity: kWh (nameplate)
- Money: EUR
- Percentages: 0-100

ENERGY BALANCE:
self_consumed + imported = consumption
self_consumed + exported + battery_loss <= generation

All energy flows are >= 0.
"""

# Tariffs (EUR/kWh)
P_BUY_EUR_PER_KWH = 0.24
P_SELL_EUR_PER_KWH = 0.06

# Generation calibration
DAYS_PER_YEAR = 365
MONTHS_PER_YEAR = 12
YEAR_KWH_PER_PANEL = 952.65  # 26.1 kWh/day for 10 panels: (26.1 / 10) * 365
PANEL_WATTAGE_W = 600

# Autonomy regression coefficients
AUTONOMY_A0 = 0.33757282  # base autonomy at r = 0
AUTONOMY_B0 = 0.04968257  # autonomy gained per unit of r
BATTERY_IMPACT_D = 1.03
CHARGE_THRESHOLD_T = 0.57
CHARGE_SCALE_S = 0.34

# Battery parameters
BATTERY_USABLE_RATIO = 0.81  # depth of discharge and derating
BATTERY_ETA_RT = 0.80  # round-trip efficiency

# Payback reported when savings cannot recover the price
NOT_RECOVERABLE_YEARS = 99

# Result fields
COL_GENERATION_KWH = "generation_kwh_year"
COL_CONSUMPTION_KWH = "consumption_kwh_year"
COL_GENERATION_RATIO = "generation_ratio"
COL_AUTONOMY_PCT = "autonomy_pct"
COL_SAVINGS_EUR = "savings_eur_year"
COL_SAVINGS_PCT = "savings_pct"
COL_SELF_CONSUMED_KWH = "self_consumed_kwh_year"
COL_EXPORTED_KWH = "exported_kwh_year"
COL_IMPORTED_KWH = "imported_kwh_year"
COL_BATTERY_LOSS_KWH = "battery_loss_kwh_year"

RESULT_COLUMNS = [
    COL_GENERATION_KWH,
    COL_CONSUMPTION_KWH,
    COL_GENERATION_RATIO,
    COL_AUTONOMY_PCT,
    COL_SAVINGS_EUR,
    COL_SAVINGS_PCT,
    COL_SELF_CONSUMED_KWH,
    COL_EXPORTED_KWH,
    COL_IMPORTED_KWH,
    COL_BATTERY_LOSS_KWH,
]
