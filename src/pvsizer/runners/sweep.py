"""Sensitivity sweeps over battery size and panel count."""

from typing import Iterable, Optional

import numpy as np
import pandas as pd

from pvsizer.core.constants import RESULT_COLUMNS
from pvsizer.core.estimator import estimate_from_monthly_bill
from pvsizer.io.formats import write_table


def _as_1d(values: Iterable[float], name: str) -> np.ndarray:
    arr = np.asarray(list(values), dtype=float)
    if arr.ndim != 1 or arr.size == 0:
        raise ValueError(f"{name} must be a non-empty sequence of numbers")
    return arr


def sweep_battery_sizes(
    panel_count: int, monthly_bill_eur: float, battery_sizes: Iterable[float]
) -> pd.DataFrame:
    """Estimate one system across several battery sizes.

    Args:
        panel_count: Number of panels
        monthly_bill_eur: Monthly electricity bill in EUR
        battery_sizes: Battery capacities in kWh

    Returns:
        DataFrame indexed by battery_kwh with one column per result field
    """
    sizes = _as_1d(battery_sizes, "battery_sizes")
    rows = [
        estimate_from_monthly_bill(panel_count, monthly_bill_eur, float(b)).model_dump()
        for b in sizes
    ]
    df = pd.DataFrame(rows, columns=RESULT_COLUMNS, index=pd.Index(sizes, name="battery_kwh"))
    return df


def sweep_panel_counts(
    panel_counts: Iterable[int], monthly_bill_eur: float, battery_kwh: float = 0.0
) -> pd.DataFrame:
    """Estimate several system sizes for one household.

    Args:
        panel_counts: Panel counts to evaluate
        monthly_bill_eur: Monthly electricity bill in EUR
        battery_kwh: Battery capacity in kWh for every system

    Returns:
        DataFrame indexed by panel_count with one column per result field
    """
    counts = _as_1d(panel_counts, "panel_counts")
    rows = [
        estimate_from_monthly_bill(float(n), monthly_bill_eur, battery_kwh).model_dump()
        for n in counts
    ]
    df = pd.DataFrame(rows, columns=RESULT_COLUMNS, index=pd.Index(counts.astype(int), name="panel_count"))
    return df


def run_battery_sweep(
    panel_count: int,
    monthly_bill_eur: float,
    battery_sizes: Iterable[float],
    output_path: Optional[str] = None,
) -> pd.DataFrame:
    """Run a battery sweep and optionally write it to disk."""
    print(f"Sweeping battery sizes for {panel_count} panels at €{monthly_bill_eur:.2f}/month...")
    df = sweep_battery_sizes(panel_count, monthly_bill_eur, battery_sizes)

    gain = df["autonomy_pct"].iloc[-1] - df["autonomy_pct"].iloc[0]
    print(f"✓ {len(df)} sizes evaluated, autonomy gain across range: {gain:.1f} pp")

    if output_path is not None:
        written = write_table(df.reset_index(), output_path)
        print(f"Wrote sweep to {written}")

    return df
