"""rowdiff: common and different rows between two versions of a table.

The rowdiff package provides tools for reconciling two in-memory tables:
- Content based row identity (hashing of canonical cell strings)
- Three row pairing methods: direct, set and match
- Column alignment by name (rearranging, auto-aligning, common columns)
- Comparisons that decide equality on a column subset but return full rows
- Conversion from and to pandas DataFrames and plain text rendering
"""

import logging
from importlib import metadata

# Schema alignment
from .align import auto_align, common_columns, rearrange_columns

# Array validation and selection
from .arrays import (
    check_proper_array,
    ignore_columns,
    ignore_rows,
    is_proper_array,
    keep_columns,
    keep_rows,
    take_rows,
)

# Adapters
from .convert import (
    array_from_dataframe,
    array_from_strings,
    array_to_dataframe,
    row_from_strings,
)

# Core types and data structures
from .core import (
    TRUNCATED_MARK,
    BasicStringHashable,
    ComparisonResult,
    ConfigurationError,
    ImproperArrayError,
    Method,
    Options,
    RowDiffError,
    RowKey,
)

# Row pairing algorithms
from .engine import get_common_indices, get_different_indices
from .formatting import pretty_format, string_format

# Row identity
from .hashing import (
    build_index,
    cell_key,
    row_key,
    row_keys,
    rows_are_permutations_of_each_other,
)

# Comparisons
from .pipeline import get_common_rows, get_different_rows
from .types import Array, ColName, Row, RowIndex, StringHashable

try:
    __version__ = metadata.version("rowdiff")
except metadata.PackageNotFoundError:
    # Fallback for development installs
    __version__ = "0.1.0"

__all__ = [
    # Core types
    "StringHashable",
    "BasicStringHashable",
    "Row",
    "Array",
    "RowIndex",
    "ColName",
    "RowKey",
    "Method",
    "Options",
    "ComparisonResult",
    "TRUNCATED_MARK",
    # Errors
    "RowDiffError",
    "ImproperArrayError",
    "ConfigurationError",
    # Row identity
    "cell_key",
    "row_key",
    "row_keys",
    "rows_are_permutations_of_each_other",
    "build_index",
    # Row pairing
    "get_common_indices",
    "get_different_indices",
    # Arrays
    "check_proper_array",
    "is_proper_array",
    "keep_columns",
    "ignore_columns",
    "keep_rows",
    "ignore_rows",
    "take_rows",
    # Alignment
    "rearrange_columns",
    "auto_align",
    "common_columns",
    # Comparisons
    "get_common_rows",
    "get_different_rows",
    # Adapters
    "row_from_strings",
    "array_from_strings",
    "array_from_dataframe",
    "array_to_dataframe",
    "pretty_format",
    "string_format",
    # Logging
    "get_logger",
]


# Configure package-wide logging
def get_logger(name: str | None = None) -> logging.Logger:
    """Get a logger for the rowdiff package.

    Parameters
    ----------
    name : str | None, optional
        Logger name. If None, uses the package name.

    Returns
    -------
    logging.Logger
        Configured logger instance.
    """
    if name is None:
        name = __name__.split(".")[0]
    return logging.getLogger(name)


# Set up default logging configuration
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
