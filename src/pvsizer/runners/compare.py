"""Package comparison runner.

Evaluates every available package of a catalog for one household bill and
marks the package whose bill bracket contains that bill as recommended.
"""

from typing import Optional

import pandas as pd

from pvsizer.core.constants import PANEL_WATTAGE_W
from pvsizer.core.estimator import estimate_from_monthly_bill
from pvsizer.core.metrics import calculate_payback_years, to_monthly_figures
from pvsizer.core.schemas import CatalogConfig, PackageConfig
from pvsizer.core.validate import validate_non_negative, validate_positive
from pvsizer.io.catalog import comparison_metadata, load_catalog, write_comparison
from pvsizer.io.formats import ensure_columns

COMPARISON_COLUMNS = [
    "package_id",
    "brand",
    "panel_count",
    "battery_kwh",
    "power_kwp",
    "price_eur",
    "autonomy_pct",
    "savings_eur_year",
    "savings_eur_month",
    "savings_pct",
    "payback_years",
    "recommended",
]


def power_kwp(panel_count: int) -> float:
    """Peak power in kWp."""
    return panel_count * PANEL_WATTAGE_W / 1000


def available_packages(catalog: CatalogConfig, variant: str) -> list[PackageConfig]:
    """Packages that have a price for the given installation variant."""
    return [pkg for pkg in catalog.packages if pkg.price_for(variant) is not None]


def find_recommended_index(packages: list[PackageConfig], monthly_bill_eur: float) -> int:
    """Index of the package whose bill bracket contains the bill.

    Brackets are [min, max); a missing max is open-ended. Falls back to the
    middle package when no bracket matches.

    Raises:
        ValueError: If packages is empty
    """
    if not packages:
        raise ValueError("No packages to recommend from")

    for i, pkg in enumerate(packages):
        if monthly_bill_eur >= pkg.min_bill_eur and (
            pkg.max_bill_eur is None or monthly_bill_eur < pkg.max_bill_eur
        ):
            return i
    return len(packages) // 2


def compare_packages(
    catalog: CatalogConfig,
    monthly_bill_eur: float,
    variant: str,
    battery_kwh: Optional[float] = None,
) -> pd.DataFrame:
    """Evaluate every available package for a household.

    Args:
        catalog: Package catalog
        monthly_bill_eur: Household monthly electricity bill in EUR
        variant: Installation variant used to look up prices
        battery_kwh: Battery size for every package (None = package's own)

    Returns:
        DataFrame with one row per available package, in catalog order

    Raises:
        InvalidInput: If the bill or battery override is invalid
        ValueError: If no package is available for the variant
    """
    validate_positive(monthly_bill_eur, "monthly_bill_eur")
    if battery_kwh is not None:
        validate_non_negative(battery_kwh, "battery_kwh")

    packages = available_packages(catalog, variant)
    if not packages:
        raise ValueError(f"No packages in catalog '{catalog.name}' are available for variant '{variant}'")

    recommended = find_recommended_index(packages, monthly_bill_eur)

    rows = []
    for i, pkg in enumerate(packages):
        battery = pkg.battery_kwh if battery_kwh is None else battery_kwh
        price = pkg.price_for(variant)

        result = estimate_from_monthly_bill(pkg.panel_count, monthly_bill_eur, battery)
        monthly = to_monthly_figures(result)

        rows.append(
            {
                "package_id": pkg.id,
                "brand": pkg.brand,
                "panel_count": pkg.panel_count,
                "battery_kwh": battery,
                "power_kwp": power_kwp(pkg.panel_count),
                "price_eur": price,
                "autonomy_pct": result.autonomy_pct,
                "savings_eur_year": result.savings_eur_year,
                "savings_eur_month": monthly.savings_eur_month,
                "savings_pct": result.savings_pct,
                "payback_years": calculate_payback_years(price, result),
                "recommended": i == recommended,
            }
        )

    table = pd.DataFrame(rows, columns=COMPARISON_COLUMNS)
    ensure_columns(table, COMPARISON_COLUMNS)
    return table


def run_comparison(
    catalog_path: str,
    monthly_bill_eur: float,
    variant: str,
    battery_kwh: Optional[float] = None,
    output_path: Optional[str] = None,
) -> pd.DataFrame:
    """Load a catalog, compare its packages, and optionally write the table.

    Args:
        catalog_path: Path to catalog YAML
        monthly_bill_eur: Household monthly electricity bill in EUR
        variant: Installation variant used to look up prices
        battery_kwh: Battery size override
        output_path: Optional output table path

    Returns:
        Comparison DataFrame
    """
    print(f"Loading catalog from {catalog_path}...")
    catalog = load_catalog(catalog_path)
    print(f"Catalog: {catalog.name} ({len(catalog.packages)} packages)")

    print(f"Comparing packages for a €{monthly_bill_eur:.2f}/month bill ({variant})...")
    table = compare_packages(catalog, monthly_bill_eur, variant, battery_kwh)

    best = table[table["recommended"]].iloc[0]
    print(
        f"✓ Recommended: {best['package_id']} - autonomy {best['autonomy_pct']:.1f}%, "
        f"savings €{best['savings_eur_year']}/year, payback {best['payback_years']} years"
    )

    if output_path is not None:
        metadata = comparison_metadata(
            catalog_name=catalog.name,
            variant=variant,
            monthly_bill_eur=monthly_bill_eur,
            battery_override_kwh=battery_kwh,
        )
        written = write_comparison(output_path, table, metadata)
        print(f"Wrote comparison to {written}")

    return table
