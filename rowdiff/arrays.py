"""Validation and row/column selection on arrays.

An array is well formed ("proper") when it is not empty, its header names
no column twice and every row is as long as the header.  Every function
here checks that first and raises
:class:`~rowdiff.core.ImproperArrayError` otherwise.  None of them modify
their input; selected rows are shared with the input, projected rows are
new lists.
"""

from collections.abc import Iterable, Sequence

from .core import ImproperArrayError, string_hash
from .hashing import cell_keys
from .types import Array, ColName, Row, RowIndex


def check_proper_array(array: Array) -> None:
    """Validate that ``array`` is a well formed table.

    Raises
    ------
    ImproperArrayError
        If the array is empty, a column name is repeated in the header, or
        a row's length differs from the header's.
    """
    if len(array) == 0:
        raise ImproperArrayError("empty array")

    header = array[0]
    seen: set[int] = set()
    for column, key in zip(header, cell_keys(header)):
        if key in seen:
            raise ImproperArrayError(f"duplicate column: {string_hash(column)}")
        seen.add(key)

    length = len(header)
    for i, row in enumerate(array):
        if len(row) != length:
            raise ImproperArrayError(
                f"row {i} has {len(row)} columns, expected {length}"
            )


def is_proper_array(array: Array) -> bool:
    """Return ``True`` if :func:`check_proper_array` accepts ``array``."""
    try:
        check_proper_array(array)
    except ImproperArrayError:
        return False
    return True


def column_positions(header: Row, columns: Iterable[ColName]) -> list[int]:
    """Return, in ascending order, the positions in ``header`` named in ``columns``.

    Names in ``columns`` that are not in the header are ignored, as are
    repeats.
    """
    wanted = set(cell_keys(list(columns)))
    return [i for i, key in enumerate(cell_keys(header)) if key in wanted]


def _project(array: Array, positions: Sequence[int]) -> list[list]:
    return [[row[j] for j in positions] for row in array]


def keep_columns(array: Array, columns: Sequence[ColName] | None) -> list[list]:
    """Return a copy of ``array`` with only the named columns.

    Columns keep the order they have in ``array``, not the order of
    ``columns``.  Names absent from the header are ignored.  If
    ``columns`` is ``None`` every column is kept.
    """
    check_proper_array(array)
    if columns is None:
        positions = list(range(len(array[0])))
    else:
        positions = column_positions(array[0], columns)
    return _project(array, positions)


def ignore_columns(array: Array, columns: Sequence[ColName] | None) -> list[list]:
    """Return a copy of ``array`` without the named columns.

    Names absent from the header are ignored.  If ``columns`` is ``None``
    no column is dropped.
    """
    check_proper_array(array)
    dropped = set() if columns is None else set(column_positions(array[0], columns))
    positions = [i for i in range(len(array[0])) if i not in dropped]
    return _project(array, positions)


def keep_rows(array: Array, rows: Iterable[RowIndex]) -> list[Row]:
    """Return the rows of ``array`` whose index is in ``rows``.

    The result follows the order of ``array`` whatever the order of
    ``rows``, and a repeated index selects its row once.  Selecting no rows
    returns an empty list.
    """
    check_proper_array(array)
    wanted = set(rows)
    return [row for i, row in enumerate(array) if i in wanted]


def ignore_rows(array: Array, rows: Iterable[RowIndex]) -> list[Row]:
    """Return the rows of ``array`` whose index is not in ``rows``."""
    check_proper_array(array)
    ignored = set(rows)
    return [row for i, row in enumerate(array) if i not in ignored]


def take_rows(array: Array, rows: Sequence[RowIndex]) -> list[Row]:
    """Return ``array[i]`` for every ``i`` in ``rows``, in the order given.

    Raises
    ------
    IndexError
        If an index is out of range.
    """
    check_proper_array(array)
    return [array[i] for i in rows]
