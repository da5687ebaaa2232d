"""Column alignment between arrays.

Two snapshots of a table often carry the same columns in a different order,
or only partly the same columns.  The functions here reorder columns by
name so that arrays can be compared, or simply read, side by side.  Column
names are matched on their canonical strings.
"""

from collections.abc import Sequence

from .arrays import check_proper_array
from .core import ConfigurationError, string_hash
from .hashing import cell_keys
from .types import Array, ColName, StringHashable


def rearrange_columns(array: Array, columns: Sequence[ColName]) -> list[list]:
    """Reorder the columns of ``array`` to follow ``columns``.

    Parameters
    ----------
    array : Array
        A well formed array.
    columns : Sequence[ColName]
        The header names of ``array``, each exactly once, in the wanted
        order.

    Returns
    -------
    list[list]
        A new array whose column ``j`` is the column of ``array`` named
        ``columns[j]``.

    Raises
    ------
    ImproperArrayError
        If ``array`` is not well formed.
    ConfigurationError
        If a header name is missing from ``columns``, or ``columns``
        repeats a name or names a column the array does not have.
    """
    check_proper_array(array)

    target_keys = cell_keys(columns)
    wanted = set(target_keys)
    position: dict[int, int] = {}
    for i, (column, key) in enumerate(zip(array[0], cell_keys(array[0]))):
        if key not in wanted:
            raise ConfigurationError(f"column {string_hash(column)} not found")
        position[key] = i

    if len(position) != len(target_keys):
        raise ConfigurationError("columns must use the same names")

    order = [position[key] for key in target_keys]
    return [[row[j] for j in order] for row in array]


def auto_align(array1: Array, array2: Array) -> tuple[list[list], list[list]]:
    """Move the columns both arrays share to the front of each.

    The shared columns come first on both sides, in the order they have in
    ``array1``.  Each array's remaining columns follow in their original
    order.  No column is dropped.

    Raises
    ------
    ImproperArrayError
        If either array is not well formed.
    """
    check_proper_array(array1)
    check_proper_array(array2)

    keys1 = cell_keys(array1[0])
    keys2 = cell_keys(array2[0])
    position2 = {key: i for i, key in enumerate(keys2)}

    order1: list[int] = []
    order2: list[int] = []
    tail1: list[int] = []
    for i, key in enumerate(keys1):
        if key in position2:
            order1.append(i)
            order2.append(position2[key])
        else:
            tail1.append(i)
    order1.extend(tail1)

    shared = set(keys1)
    order2.extend(i for i, key in enumerate(keys2) if key not in shared)

    aligned1 = [[row[j] for j in order1] for row in array1]
    aligned2 = [[row[j] for j in order2] for row in array2]
    return aligned1, aligned2


def common_columns(array1: Array, array2: Array) -> list[StringHashable]:
    """Return the header cells of ``array1`` that ``array2`` also has.

    The result is in ``array1``'s column order.

    Raises
    ------
    ImproperArrayError
        If either array is not well formed.
    """
    check_proper_array(array1)
    check_proper_array(array2)

    keys2 = set(cell_keys(array2[0]))
    return [
        column
        for column, key in zip(array1[0], cell_keys(array1[0]))
        if key in keys2
    ]


def missing_columns(array: Array, columns: Sequence[ColName]) -> list[str]:
    """Return the names in ``columns`` that are not in the header of ``array``."""
    header_keys = set(cell_keys(array[0]))
    return [
        string_hash(column)
        for column, key in zip(columns, cell_keys(columns))
        if key not in header_keys
    ]
