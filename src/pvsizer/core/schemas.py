"""Pydantic schemas for estimator values and catalog configuration."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class CalculationInput(BaseModel):
    """Validated estimator input (see ``core.validate.validate_inputs``)."""

    model_config = ConfigDict(frozen=True)

    panel_count: int
    annual_consumption_kwh: float
    battery_capacity_kwh: float = 0.0


class CalculationResult(BaseModel):
    """Annual energy and money balance for one system."""

    model_config = ConfigDict(frozen=True)

    generation_kwh_year: float = Field(..., description="Annual generation (kWh)")
    consumption_kwh_year: float = Field(..., description="Annual consumption (kWh)")
    generation_ratio: float = Field(..., description="Generation to consumption ratio")
    autonomy_pct: float = Field(..., ge=0, le=100, description="Autonomy percentage")
    savings_eur_year: int = Field(..., description="Annual savings (EUR)")
    savings_pct: float = Field(..., description="Savings as percentage of the bill without PV")
    self_consumed_kwh_year: int = Field(..., ge=0, description="Annual self-consumption (kWh)")
    exported_kwh_year: int = Field(..., ge=0, description="Annual export to grid (kWh)")
    imported_kwh_year: int = Field(..., ge=0, description="Annual import from grid (kWh)")
    battery_loss_kwh_year: int = Field(..., ge=0, description="Annual battery round-trip loss (kWh)")


class MonthlyFigures(BaseModel):
    """Annual result figures spread evenly over twelve months."""

    model_config = ConfigDict(frozen=True)

    savings_eur_month: int
    self_consumed_kwh_month: int
    exported_kwh_month: int
    imported_kwh_month: int


class PackageConfig(BaseModel):
    """One installable package from a catalog."""

    id: str = Field(..., description="Unique package identifier")
    brand: str = Field(default="")
    panel_count: int = Field(..., gt=0, description="Number of panels")
    inverter_kw: float = Field(..., gt=0, description="Inverter rating in kW")
    battery_kwh: float = Field(default=0.0, ge=0, description="Bundled battery capacity in kWh")
    prices: dict[str, Optional[float]] = Field(
        default_factory=dict, description="Price per installation variant (null = unavailable)"
    )
    min_bill_eur: float = Field(default=0.0, ge=0, description="Lower monthly bill bound (inclusive)")
    max_bill_eur: Optional[float] = Field(
        default=None, gt=0, description="Upper monthly bill bound (exclusive, None = open)"
    )

    @field_validator("prices")
    @classmethod
    def validate_prices(cls, v: dict[str, Optional[float]]) -> dict[str, Optional[float]]:
        """Ensure listed prices are non-negative."""
        for variant, price in v.items():
            if price is not None and price < 0:
                raise ValueError(f"Price for variant '{variant}' must be non-negative")
        return v

    @model_validator(mode="after")
    def validate_bill_bracket(self) -> "PackageConfig":
        """Ensure the bill bracket is not empty."""
        if self.max_bill_eur is not None and self.max_bill_eur <= self.min_bill_eur:
            raise ValueError(
                f"max_bill_eur ({self.max_bill_eur}) must exceed min_bill_eur ({self.min_bill_eur})"
            )
        return self

    def price_for(self, variant: str) -> Optional[float]:
        return self.prices.get(variant)


class CatalogConfig(BaseModel):
    """A package catalog, ordered from smallest to largest system."""

    name: str = Field(..., description="Catalog name")
    currency: str = Field(default="EUR")
    packages: list[PackageConfig] = Field(default_factory=list)

    @field_validator("packages")
    @classmethod
    def validate_unique_ids(cls, v: list[PackageConfig]) -> list[PackageConfig]:
        """Ensure package ids are unique."""
        seen = set()
        for pkg in v:
            if pkg.id in seen:
                raise ValueError(f"Duplicate package id: {pkg.id}")
            seen.add(pkg.id)
        return v


class ComparisonMetadata(BaseModel):
    """Metadata written next to a comparison table."""

    created_at: datetime = Field(default_factory=datetime.now)
    pvsizer_version: str
    catalog_name: str
    variant: str
    monthly_bill_eur: float
    battery_override_kwh: Optional[float] = None
