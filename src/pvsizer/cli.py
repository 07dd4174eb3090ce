"""Command-line interface for pvsizer."""

import json
import logging
import sys
from typing import Optional

import typer

from pvsizer import __version__

app = typer.Typer(
    help="pvsizer - residential PV sizing and savings estimator",
    no_args_is_help=True,
)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)-8s %(name)s  %(message)s",
    )


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging")):
    """Configure logging for every command."""
    _configure_logging("DEBUG" if verbose else "WARNING")


@app.command()
def version():
    """Show pvsizer version."""
    typer.echo(f"pvsizer v{__version__}")


@app.command()
def estimate(
    panels: int,
    monthly_bill: Optional[float] = typer.Option(None, help="Monthly electricity bill in EUR"),
    annual_bill: Optional[float] = typer.Option(None, help="Annual electricity bill in EUR"),
    consumption: Optional[float] = typer.Option(None, help="Annual consumption in kWh"),
    battery: float = typer.Option(0.0, help="Battery capacity in kWh (0 = no battery)"),
    price: Optional[float] = typer.Option(None, help="System price in EUR, for payback"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
):
    """Estimate autonomy and savings for one system.

    Args:
        panels: Number of panels
    """
    from pvsizer.core.estimator import (
        estimate_from_annual_bill,
        estimate_from_consumption,
        estimate_from_monthly_bill,
    )
    from pvsizer.core.metrics import calculate_payback_years, to_monthly_figures
    from pvsizer.core.validate import InvalidInput

    given = [v for v in (monthly_bill, annual_bill, consumption) if v is not None]
    if len(given) != 1:
        typer.secho(
            "✗ Provide exactly one of --monthly-bill, --annual-bill or --consumption",
            fg=typer.colors.RED,
            err=True,
        )
        raise typer.Exit(1)

    try:
        if monthly_bill is not None:
            result = estimate_from_monthly_bill(panels, monthly_bill, battery)
        elif annual_bill is not None:
            result = estimate_from_annual_bill(panels, annual_bill, battery)
        else:
            result = estimate_from_consumption(panels, consumption, battery)
        payback = calculate_payback_years(price, result) if price is not None else None
    except InvalidInput as e:
        typer.secho(f"✗ Invalid input: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)

    monthly = to_monthly_figures(result)

    if as_json:
        payload = {
            "result": result.model_dump(),
            "monthly": monthly.model_dump(),
            "payback_years": payback,
        }
        typer.echo(json.dumps(payload, indent=2))
        return

    typer.echo("\n" + "=" * 60)
    typer.echo(f"ESTIMATE: {panels} panels, {battery:g} kWh battery")
    typer.echo("=" * 60)

    typer.echo(f"\nEnergy:")
    typer.echo(f"  Generation:       {result.generation_kwh_year:.1f} kWh/year")
    typer.echo(f"  Consumption:      {result.consumption_kwh_year:.1f} kWh/year")
    typer.echo(f"  Ratio (G/L):      {result.generation_ratio:.3f}")
    typer.echo(f"  Autonomy:         {result.autonomy_pct:.1f}%")

    typer.echo(f"\nEnergy Flows:")
    typer.echo(f"  Self-consumed:    {result.self_consumed_kwh_year} kWh ({monthly.self_consumed_kwh_month} kWh/month)")
    typer.echo(f"  Exported:         {result.exported_kwh_year} kWh ({monthly.exported_kwh_month} kWh/month)")
    typer.echo(f"  Imported:         {result.imported_kwh_year} kWh ({monthly.imported_kwh_month} kWh/month)")
    typer.echo(f"  Battery loss:     {result.battery_loss_kwh_year} kWh")

    typer.echo(f"\nSavings:")
    typer.echo(f"  Annual:           €{result.savings_eur_year} ({result.savings_pct:.1f}% of bill)")
    typer.echo(f"  Monthly:          €{monthly.savings_eur_month}")
    if payback is not None:
        typer.echo(f"  Payback:          {payback} years")

    typer.echo("\n" + "=" * 60 + "\n")


@app.command()
def compare(
    catalog_path: str,
    monthly_bill: float = typer.Option(..., help="Monthly electricity bill in EUR"),
    variant: str = typer.Option("mono_inclinada", help="Installation variant (price key)"),
    battery: Optional[float] = typer.Option(None, help="Battery size override in kWh"),
    output: Optional[str] = typer.Option(None, help="Write table to .parquet, .csv or .json"),
):
    """Compare every package of a catalog for one household bill.

    Args:
        catalog_path: Path to catalog YAML
    """
    from pvsizer.runners.compare import run_comparison

    try:
        table = run_comparison(catalog_path, monthly_bill, variant, battery, output)
    except Exception as e:
        typer.secho(f"\n✗ Comparison failed: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)

    typer.echo("")
    typer.echo(table.to_string(index=False))
    typer.secho(f"\n✓ Compared {len(table)} packages", fg=typer.colors.GREEN)


@app.command()
def sweep(
    panels: int,
    monthly_bill: float = typer.Option(..., help="Monthly electricity bill in EUR"),
    battery_sizes: str = typer.Option("0,5,7,10,16", help="Comma-separated battery sizes in kWh"),
    output: Optional[str] = typer.Option(None, help="Write table to .parquet, .csv or .json"),
):
    """Sweep battery sizes for one system.

    Args:
        panels: Number of panels
    """
    from pvsizer.runners.sweep import run_battery_sweep

    try:
        sizes = [float(s) for s in battery_sizes.split(",") if s.strip()]
        df = run_battery_sweep(panels, monthly_bill, sizes, output)
    except Exception as e:
        typer.secho(f"\n✗ Sweep failed: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)

    typer.echo("")
    typer.echo(df[["autonomy_pct", "savings_eur_year", "battery_loss_kwh_year"]].to_string())


@app.command()
def validate(catalog_path: str):
    """Validate a package catalog.

    Args:
        catalog_path: Path to catalog YAML
    """
    from pvsizer.io.catalog import validate_catalog_file

    try:
        validate_catalog_file(catalog_path)
        typer.secho(f"✓ Catalog at {catalog_path} is valid", fg=typer.colors.GREEN)
    except Exception as e:
        typer.secho(f"✗ Catalog validation failed: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
