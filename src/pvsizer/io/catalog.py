"""Package catalog I/O.

A catalog is a YAML file:

    name: huawei
    currency: EUR
    packages:
      - id: huawei-10
        panel_count: 10
        inverter_kw: 5
        battery_kwh: 0
        prices: {mono_inclinada: 5860, tri_inclinada: 6110}
        min_bill_eur: 180
        max_bill_eur: 250

Bill brackets are monthly bills in EUR. A null price marks a package as
unavailable for that installation variant.
"""

import json
from pathlib import Path

import pandas as pd
import yaml

from pvsizer import __version__
from pvsizer.core.schemas import CatalogConfig, ComparisonMetadata
from pvsizer.io.formats import write_table


def load_catalog(catalog_path: str | Path) -> CatalogConfig:
    """Load a package catalog.

    Args:
        catalog_path: Path to catalog YAML file

    Returns:
        CatalogConfig
    """
    catalog_path = Path(catalog_path)

    if not catalog_path.exists():
        raise FileNotFoundError(f"Catalog not found: {catalog_path}")

    with open(catalog_path) as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Catalog {catalog_path} must be a YAML mapping")

    return CatalogConfig(**data)


def write_catalog(catalog_path: str | Path, catalog: CatalogConfig) -> None:
    """Write a package catalog to YAML.

    Args:
        catalog_path: Path to catalog YAML file
        catalog: Catalog to write
    """
    catalog_path = Path(catalog_path)
    catalog_path.parent.mkdir(parents=True, exist_ok=True)

    with open(catalog_path, "w") as f:
        yaml.dump(catalog.model_dump(), f, default_flow_style=False, sort_keys=False)


def validate_catalog_file(catalog_path: str | Path) -> bool:
    """Validate that a catalog file parses and lists at least one package.

    Args:
        catalog_path: Path to catalog YAML file

    Returns:
        True if valid

    Raises:
        ValueError: If catalog is empty
    """
    catalog = load_catalog(catalog_path)
    if not catalog.packages:
        raise ValueError(f"Catalog '{catalog.name}' has no packages")
    return True


def write_comparison(
    output_path: str | Path,
    table: pd.DataFrame,
    metadata: ComparisonMetadata,
) -> Path:
    """Write a comparison table and its metadata sidecar.

    The metadata goes to ``<output stem>.meta.json`` next to the table.

    Args:
        output_path: Table path (.parquet, .csv or .json)
        table: Comparison table
        metadata: Reproducibility metadata

    Returns:
        Path of the written table
    """
    written = write_table(table, output_path)

    meta_path = written.with_name(f"{written.stem}.meta.json")
    with open(meta_path, "w") as f:
        json.dump(metadata.model_dump(), f, indent=2, default=str)

    return written


def comparison_metadata(**kwargs) -> ComparisonMetadata:
    """Build comparison metadata stamped with the pvsizer version."""
    return ComparisonMetadata(pvsizer_version=__version__, **kwargs)
