"""
Handles CSV loading, column extraction, numeric coercion and sequence helpers.
"""

# These helpers feed the statistics engine: CSVs are read as text so no
# column is silently converted, numeric columns are coerced explicitly with a
# caller-supplied default for empty cells, and the resulting columns are
# projected into plain sequences.

import logging
import math
from typing import Iterable, List, Mapping, Sequence, Union

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)

Records = Union[pd.DataFrame, Sequence[Mapping[str, object]]]


def load_csv(filepath):
    """Load a delimited text file into row records.

    Every cell is kept as text; empty cells read as ``""`` rather than NaN so
    that :func:`numeric` decides how to fill them.

    Args:
        filepath (str): Path to the CSV file. The first row holds field names.

    Returns:
        pd.DataFrame: One row per record, columns keyed by field name.
    """
    df = pd.read_csv(filepath, dtype=str, keep_default_na=False)
    logger.debug("Loaded %d records with fields %s from %s", len(df), list(df.columns), filepath)
    return df


def col(records: Records, name: str) -> List[object]:
    """Project one named field across records, preserving row order.

    Args:
        records: A DataFrame from :func:`load_csv` or a list of dict records.
        name: Field name to extract.

    Returns:
        list: The field value of every record.

    Raises:
        KeyError: If ``name`` is not a field of the records.
    """
    if isinstance(records, pd.DataFrame):
        if name not in records.columns:
            raise KeyError(f"Unknown field '{name}'. Available: {list(records.columns)}")
        return records[name].tolist()
    values = []
    for index, record in enumerate(records):
        if name not in record:
            raise KeyError(f"Record {index} has no field '{name}'.")
        values.append(record[name])
    return values


def numeric(df: pd.DataFrame, columns: Iterable[str], default: float = 0.0) -> pd.DataFrame:
    """Return a copy of ``df`` with the named columns coerced to floats.

    Cells that are empty or cannot be parsed as numbers take ``default``.
    The input frame is left unchanged.

    Args:
        df: Records as loaded by :func:`load_csv`.
        columns: Field names to convert.
        default: Value substituted for empty or non-numeric cells.

    Returns:
        pd.DataFrame: Converted copy.

    Raises:
        KeyError: If any requested column is missing.
    """
    columns = list(columns)
    missing = [c for c in columns if c not in df.columns]
    if missing:
        raise KeyError(f"Cannot convert missing columns: {missing}")

    out = df.copy()
    for name in columns:
        raw = out[name]
        if not pd.api.types.is_numeric_dtype(raw):
            raw = raw.astype(str).str.strip()
        converted = pd.to_numeric(raw, errors="coerce")
        n_filled = int(converted.isna().sum())
        if n_filled:
            logger.debug("Column %s: %d empty or non-numeric cells set to %s", name, n_filled, default)
        out[name] = converted.fillna(default).astype(float)
    return out


def seq(start: float, stop: float, step: float = 1) -> np.ndarray:
    """Return the evenly spaced run ``start, start + step, ...`` up to ``stop``.

    ``stop`` is included when it falls on the grid, so ``seq(1, 10)`` has ten
    elements and ``seq(-10, 10, 2)[5] == 0``.

    Raises:
        ValueError: If ``step`` is zero or points away from ``stop``.
    """
    if step == 0:
        raise ValueError("step must be non-zero.")
    span = (stop - start) / step
    if span < 0:
        raise ValueError(
            f"step {step} does not move from {start} towards {stop}."
        )
    # Relative slack keeps 0.1-style steps from dropping the endpoint.
    count = int(math.floor(span * (1.0 + 1e-12))) + 1
    return start + step * np.arange(count, dtype=float)


def rep(value: float, n: int) -> np.ndarray:
    """Return an array of length ``n`` filled with ``value``."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}.")
    return np.full(int(n), value, dtype=float)
