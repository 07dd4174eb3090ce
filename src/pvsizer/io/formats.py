"""Table output helpers."""

from pathlib import Path

import pandas as pd
import pyarrow as pa
import pyarrow.parquet as pq

SUPPORTED_SUFFIXES = (".parquet", ".csv", ".json")


def ensure_columns(df: pd.DataFrame, required_columns: list[str]) -> None:
    """Ensure dataframe has required columns.

    Args:
        df: DataFrame to check
        required_columns: List of required column names

    Raises:
        ValueError: If any required columns are missing
    """
    missing = set(required_columns) - set(df.columns)
    if missing:
        raise ValueError(f"Missing required columns: {missing}")


def write_table(df: pd.DataFrame, path: str | Path) -> Path:
    """Write a result table, choosing the format from the file suffix.

    Args:
        df: Table to write (index is not written)
        path: Output path ending in .parquet, .csv or .json

    Returns:
        Path written

    Raises:
        ValueError: If the suffix is not supported
    """
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise ValueError(f"Unsupported output format '{suffix}'. Use one of {SUPPORTED_SUFFIXES}")

    path.parent.mkdir(parents=True, exist_ok=True)

    if suffix == ".parquet":
        table = pa.Table.from_pandas(df.reset_index(drop=True), preserve_index=False)
        pq.write_table(table, path, compression="snappy")
    elif suffix == ".csv":
        df.to_csv(path, index=False)
    else:
        df.to_json(path, orient="records", indent=2)

    return path


def read_table(path: str | Path) -> pd.DataFrame:
    """Read a table written by ``write_table``."""
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix == ".parquet":
        return pd.read_parquet(path)
    if suffix == ".csv":
        return pd.read_csv(path)
    if suffix == ".json":
        return pd.read_json(path, orient="records")
    raise ValueError(f"Unsupported input format '{suffix}'. Use one of {SUPPORTED_SUFFIXES}")
