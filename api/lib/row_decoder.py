"""
Named-field row decoding

Each registry query declares the columns it selects and the scalar type it
expects from each. Rows are checked against that schema once, at the call
site: a missing column is a schema error, while a cell that cannot be
converted is treated as absent.
"""

import logging
import math
from typing import Any, Dict, Mapping, Optional, Type

import pandas as pd

logger = logging.getLogger(__name__)

RowSchema = Mapping[str, Type]


class RowSchemaError(Exception):
    """Raised when a returned row does not carry a declared column."""

    pass


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def to_optional_int(value: Any) -> Optional[int]:
    """Convert a cell to int, or None if absent or not integral."""
    if _is_missing(value) or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value.lstrip("-").isdigit():
            return None
        return int(value)
    try:
        as_float = float(value)
    except (TypeError, ValueError):
        return None
    if math.isinf(as_float) or not as_float.is_integer():
        return None
    return int(value)


def to_optional_str(value: Any) -> Optional[str]:
    """Convert a cell to str, or None if absent."""
    if _is_missing(value):
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


_CONVERTERS = {
    int: to_optional_int,
    str: to_optional_str,
}


def decode_row(row: Mapping[str, Any], schema: RowSchema) -> Dict[str, Any]:
    """
    Decode a row into {column: Optional[value]} following a declared schema.

    Column lookup is case-insensitive so that backends which upper-case
    identifiers decode the same way.

    Args:
        row: Row mapping as returned by a QueryExecutor
        schema: {column_name: int | str}

    Returns:
        Dict keyed by the schema's column names

    Raises:
        RowSchemaError: If a declared column is not present in the row
    """
    by_lower = {str(k).lower(): v for k, v in row.items()}
    decoded = {}

    for column, column_type in schema.items():
        key = column.lower()
        if key not in by_lower:
            raise RowSchemaError(f"Column '{column}' missing from result row")
        decoded[column] = _CONVERTERS[column_type](by_lower[key])

    return decoded
