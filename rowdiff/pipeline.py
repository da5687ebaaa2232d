"""Common and different rows between two arrays.

:func:`get_common_rows` and :func:`get_different_rows` are the main entry
points of rowdiff.  Both run the same steps:

1. Check that both arrays are well formed and that the options are valid.
2. Project each array onto the columns that decide row equality
   (``use_columns``, everything but ``ignore_columns``, or all columns).
3. Check that both projections name the same columns and put the second
   one in the first one's column order.
4. Pair the data rows of the projections with the chosen method.
5. Translate the resulting indices back to positions in the input arrays,
   header included, and select those rows from the *input* arrays.

Equality is therefore decided on the projected columns only, while the
returned rows always carry every column of their array.
"""

import logging
from collections.abc import Callable

from .align import missing_columns, rearrange_columns
from .arrays import (
    check_proper_array,
    ignore_columns,
    ignore_rows,
    keep_columns,
    take_rows,
)
from .core import ComparisonResult, ConfigurationError, Method, Options
from .engine import IndexPair, get_common_indices, get_different_indices
from .hashing import rows_are_permutations_of_each_other
from .types import Array, RowIndex

logger = logging.getLogger(__name__)


def _comparison_arrays(
    array1: Array, array2: Array, options: Options
) -> tuple[list, list]:
    """Return the data rows of both projections, columns aligned."""
    if options.use_columns is not None:
        if len(options.use_columns) == 0:
            raise ConfigurationError("no columns to compare")
        for name, array in (("first", array1), ("second", array2)):
            missing = missing_columns(array, options.use_columns)
            if missing:
                raise ConfigurationError(
                    f"column {missing[0]} not found in the {name} array"
                )
        projected1 = keep_columns(array1, options.use_columns)
        projected2 = keep_columns(array2, options.use_columns)
    elif options.ignore_columns is not None:
        projected1 = ignore_columns(array1, options.ignore_columns)
        projected2 = ignore_columns(array2, options.ignore_columns)
    else:
        projected1 = array1
        projected2 = array2

    columns1 = projected1[0]
    columns2 = projected2[0]
    if len(columns1) == 0 or len(columns2) == 0:
        raise ConfigurationError("no columns to compare")
    if not rows_are_permutations_of_each_other(columns1, columns2):
        raise ConfigurationError("check the columns being compared")

    logger.debug("Deciding row equality on %d columns", len(columns1))
    projected2 = rearrange_columns(projected2, columns1)
    return ignore_rows(projected1, [0]), ignore_rows(projected2, [0])


def _with_header(indices: list[RowIndex]) -> list[RowIndex]:
    return [0] + [i + 1 for i in indices]


def _compare(
    array1: Array,
    array2: Array,
    options: Options,
    query: Callable[..., IndexPair],
) -> ComparisonResult:
    check_proper_array(array1)
    check_proper_array(array2)
    options.check_attributes()
    method = Method.coerce(options.method)

    below1, below2 = _comparison_arrays(array1, array2, options)
    logger.debug(
        "Comparing %d and %d data rows with method %s",
        len(below1),
        len(below2),
        method.value,
    )
    below_indices: IndexPair = query(below1, below2, method, options.sort_indices)

    indices1 = _with_header(below_indices[0])
    indices2 = _with_header(below_indices[1])
    logger.debug(
        "Selected %d and %d data rows", len(indices1) - 1, len(indices2) - 1
    )
    return ComparisonResult(
        take_rows(array1, indices1),
        take_rows(array2, indices2),
        indices1,
        indices2,
    )


def get_common_rows(
    array1: Array, array2: Array, options: Options | None = None
) -> ComparisonResult:
    """Return the rows the two arrays have in common.

    Parameters
    ----------
    array1, array2 : Array
        Well formed arrays; row 0 of each is its header.
    options : Options, optional
        Method and column selection.  Defaults to ``Options()``: the match
        method over all columns.

    Returns
    -------
    ComparisonResult
        ``(rows1, rows2, indices1, indices2)``.  ``rows1[i]`` is
        ``array1[indices1[i]]``, likewise for the second array.  The header
        is always selected first on both sides.

    Raises
    ------
    ImproperArrayError
        If either array is not well formed.
    ConfigurationError
        If the options are invalid or the compared columns do not exist in,
        or do not agree between, both arrays.

    Examples
    --------
    >>> from rowdiff import Options, array_from_strings, get_common_rows
    >>> a = array_from_strings([["id", "v"], ["1", "x"], ["2", "y"]])
    >>> b = array_from_strings([["v", "id"], ["y", "2"], ["z", "3"]])
    >>> get_common_rows(a, b, Options(sort_indices=True)).indices1
    [0, 2]
    """
    return _compare(array1, array2, options or Options(), get_common_indices)


def get_different_rows(
    array1: Array, array2: Array, options: Options | None = None
) -> ComparisonResult:
    """Return the rows that differ between the two arrays.

    Takes the same arguments, returns the same structure and raises the same
    errors as :func:`get_common_rows`.
    """
    return _compare(array1, array2, options or Options(), get_different_indices)
