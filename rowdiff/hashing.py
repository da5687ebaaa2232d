"""Row and cell identity for rowdiff.

Cells are identified by a 64-bit hash of their canonical string and rows by
a :class:`~rowdiff.core.RowKey`, a pair of 64-bit hashes over the row's
content and over the lengths of its cells.  Hashing goes through
:func:`pandas.util.hash_array`, so hashing every row of an array costs two
vectorised passes rather than one Python-level hash per cell.

Distinct rows that collide on both hash components are treated as equal.
With 128 bits of key this is an accepted approximation and no exact
comparison is made afterwards.
"""

from collections import Counter
from collections.abc import Sequence

import numpy as np
import pandas as pd

from .core import RowKey, string_hash
from .types import Array, ColName, Row, RowIndex


def _hash_strings(values: Sequence[str]) -> list[int]:
    """Hash each string to an unsigned 64-bit integer.

    Strings are encoded to UTF-8 here rather than by pandas, with
    ``surrogatepass`` so that text decoded with ``surrogateescape`` (file
    names, undecodable CSV bytes) still hashes.
    """
    if len(values) == 0:
        return []
    arr = np.asarray([s.encode("utf-8", "surrogatepass") for s in values], dtype=object)
    return pd.util.hash_array(arr, categorize=False).tolist()


def cell_keys(cells: Sequence[ColName]) -> list[int]:
    """Return the 64-bit key of every cell (or plain string name) in ``cells``."""
    return _hash_strings([string_hash(c) for c in cells])


def cell_key(cell: ColName) -> int:
    """Return the 64-bit key of a single cell's canonical string."""
    return cell_keys([cell])[0]


def _row_strings(row: Row) -> tuple[str, str]:
    strings = [string_hash(c) for c in row]
    return "".join(strings), ",".join(str(len(s)) for s in strings)


def row_keys(array: Array) -> list[RowKey]:
    """Return the :class:`RowKey` of every row of ``array``, in order.

    Parameters
    ----------
    array : Array
        Rows to hash.  No header handling is done here; pass data rows only
        if the header should not take part.

    Returns
    -------
    list[RowKey]
        One key per row.
    """
    n = len(array)
    if n == 0:
        return []
    contents = []
    lengths = []
    for row in array:
        content, length = _row_strings(row)
        contents.append(content)
        lengths.append(length)
    hashes = _hash_strings(contents + lengths)
    return [RowKey(*pair) for pair in zip(hashes[:n], hashes[n:])]


def row_key(row: Row) -> RowKey:
    """Return the :class:`RowKey` of a single row."""
    return row_keys([row])[0]


def rows_are_permutations_of_each_other(row1: Row, row2: Row) -> bool:
    """Check whether two rows hold the same cells, ignoring their order.

    The rows are compared as multisets of cell keys, so repeated cells must
    be repeated the same number of times on both sides.  This is how two
    headers are confirmed to name the same columns.
    """
    if len(row1) != len(row2):
        return False
    return Counter(cell_keys(row1)) == Counter(cell_keys(row2))


def build_index(array: Array) -> dict[RowKey, list[RowIndex]]:
    """Group the row indices of ``array`` by row identity.

    Parameters
    ----------
    array : Array
        Rows to index.

    Returns
    -------
    dict[RowKey, list[int]]
        Mapping from each distinct key to the indices of the rows carrying
        it.  Each list is in order of appearance, and keys are in order of
        their first appearance.
    """
    mapping: dict[RowKey, list[RowIndex]] = {}
    for i, key in enumerate(row_keys(array)):
        mapping.setdefault(key, []).append(i)
    return mapping
