"""Row pairing algorithms for rowdiff.

Each algorithm takes two arrays of data rows (no header) and returns two
lists of indices, one per side.  There are three ways of pairing rows,
each with a "common" and a "different" variant:

- Direct: row ``i`` of one side is only ever compared with row ``i`` of
  the other side.
- Set: a row is common if at least one equal row exists on the other side,
  however many times it occurs on either side.
- Match: equal rows are paired one to one in order of appearance; rows
  left without a partner are different.

For Match, the common and different indices of a side always add up to
every row of that side.  Set does not have this property: a row occurring
three times on one side and once on the other is common all three times
and never different.

Unless ``sort_indices`` is requested the indices come out grouped by row
identity, with groups in order of first appearance.
"""

from .core import ConfigurationError, Method
from .hashing import build_index, row_keys
from .types import Array, RowIndex

IndexPair = tuple[list[RowIndex], list[RowIndex]]


def _common_indices_match(arr1: Array, arr2: Array) -> IndexPair:
    mapping1 = build_index(arr1)
    mapping2 = build_index(arr2)

    common1: list[RowIndex] = []
    common2: list[RowIndex] = []
    for key, indices1 in mapping1.items():
        indices2 = mapping2.get(key)
        if indices2 is not None:
            n = min(len(indices1), len(indices2))
            common1.extend(indices1[:n])
            common2.extend(indices2[:n])
    return common1, common2


def _common_indices_direct(arr1: Array, arr2: Array) -> IndexPair:
    n = min(len(arr1), len(arr2))
    keys1 = row_keys(arr1[:n])
    keys2 = row_keys(arr2[:n])

    common = [i for i, (k1, k2) in enumerate(zip(keys1, keys2)) if k1 == k2]
    return common, list(common)


def _common_indices_set(arr1: Array, arr2: Array) -> IndexPair:
    mapping1 = build_index(arr1)
    mapping2 = build_index(arr2)

    common1: list[RowIndex] = []
    common2: list[RowIndex] = []
    for key, indices1 in mapping1.items():
        indices2 = mapping2.get(key)
        if indices2 is not None:
            common1.extend(indices1)
            common2.extend(indices2)
    return common1, common2


def _different_indices_match(arr1: Array, arr2: Array) -> IndexPair:
    mapping1 = build_index(arr1)
    mapping2 = build_index(arr2)

    different1: list[RowIndex] = []
    different2: list[RowIndex] = []
    for key, indices1 in mapping1.items():
        indices2 = mapping2.get(key)
        if indices2 is None:
            different1.extend(indices1)
        elif len(indices1) > len(indices2):
            different1.extend(indices1[len(indices2) :])
        elif len(indices2) > len(indices1):
            different2.extend(indices2[len(indices1) :])
    for key, indices2 in mapping2.items():
        if key not in mapping1:
            different2.extend(indices2)
    return different1, different2


def _different_indices_direct(arr1: Array, arr2: Array) -> IndexPair:
    n = min(len(arr1), len(arr2))
    keys1 = row_keys(arr1[:n])
    keys2 = row_keys(arr2[:n])

    different = [i for i, (k1, k2) in enumerate(zip(keys1, keys2)) if k1 != k2]
    # Rows past the end of the shorter array have nothing to compare with.
    different1 = different + list(range(n, len(arr1)))
    different2 = different + list(range(n, len(arr2)))
    return different1, different2


def _different_indices_set(arr1: Array, arr2: Array) -> IndexPair:
    mapping1 = build_index(arr1)
    mapping2 = build_index(arr2)

    different1: list[RowIndex] = []
    different2: list[RowIndex] = []
    for key, indices1 in mapping1.items():
        if key not in mapping2:
            different1.extend(indices1)
    for key, indices2 in mapping2.items():
        if key not in mapping1:
            different2.extend(indices2)
    return different1, different2


def get_common_indices(
    arr1: Array,
    arr2: Array,
    method: Method | str = Method.MATCH,
    sort_indices: bool = False,
) -> IndexPair:
    """Return the indices of the rows the two arrays have in common.

    Parameters
    ----------
    arr1, arr2 : Array
        Rows to compare.  Every row is data; strip headers beforehand.
    method : Method or str, default Method.MATCH
        How rows are paired; see :class:`~rowdiff.core.Method`.
    sort_indices : bool, default False
        Sort both returned lists in ascending order.

    Returns
    -------
    tuple[list[int], list[int]]
        Indices into ``arr1`` and into ``arr2``.

    Raises
    ------
    ConfigurationError
        If ``method`` is not supported.
    """
    method = Method.coerce(method)
    if method is Method.MATCH:
        indices1, indices2 = _common_indices_match(arr1, arr2)
    elif method is Method.DIRECT:
        indices1, indices2 = _common_indices_direct(arr1, arr2)
    elif method is Method.SET:
        indices1, indices2 = _common_indices_set(arr1, arr2)
    else:
        raise ConfigurationError(f"unsupported method: {method!r}")

    if sort_indices:
        indices1.sort()
        indices2.sort()
    return indices1, indices2


def get_different_indices(
    arr1: Array,
    arr2: Array,
    method: Method | str = Method.MATCH,
    sort_indices: bool = False,
) -> IndexPair:
    """Return the indices of the rows that differ between the two arrays.

    Parameters
    ----------
    arr1, arr2 : Array
        Rows to compare.  Every row is data; strip headers beforehand.
    method : Method or str, default Method.MATCH
        How rows are paired; see :class:`~rowdiff.core.Method`.
    sort_indices : bool, default False
        Sort both returned lists in ascending order.

    Returns
    -------
    tuple[list[int], list[int]]
        Indices into ``arr1`` and into ``arr2``.

    Raises
    ------
    ConfigurationError
        If ``method`` is not supported.
    """
    method = Method.coerce(method)
    if method is Method.MATCH:
        indices1, indices2 = _different_indices_match(arr1, arr2)
    elif method is Method.DIRECT:
        indices1, indices2 = _different_indices_direct(arr1, arr2)
    elif method is Method.SET:
        indices1, indices2 = _different_indices_set(arr1, arr2)
    else:
        raise ConfigurationError(f"unsupported method: {method!r}")

    if sort_indices:
        indices1.sort()
        indices2.sort()
    return indices1, indices2
