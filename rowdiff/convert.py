"""Conversion between arrays and plain Python or pandas data.

rowdiff works on sequences of rows of :class:`~rowdiff.types.StringHashable`
cells.  These helpers build such arrays from lists of strings or from a
:class:`pandas.DataFrame`, and turn an array back into a DataFrame.  To
compare two CSV files, read them with pandas as text::

    df = pd.read_csv(path, dtype=str, keep_default_na=False)
    array = array_from_dataframe(df)
"""

from collections.abc import Iterable, Sequence

import pandas as pd

from .arrays import check_proper_array
from .core import BasicStringHashable, string_hash
from .types import Array


def row_from_strings(
    values: Iterable[str] | None,
) -> list[BasicStringHashable] | None:
    """Wrap each string of a row in :class:`BasicStringHashable`.

    ``None`` is passed through unchanged.
    """
    if values is None:
        return None
    return [BasicStringHashable(v) for v in values]


def array_from_strings(
    records: Sequence[Iterable[str]] | None,
) -> list[list[BasicStringHashable]] | None:
    """Wrap every string of a table in :class:`BasicStringHashable`.

    The first record is taken as the header.  ``None`` is passed through
    unchanged.  The result is not validated.
    """
    if records is None:
        return None
    return [[BasicStringHashable(v) for v in row] for row in records]


def array_from_dataframe(df: pd.DataFrame) -> list[list[BasicStringHashable]]:
    """Build an array from a DataFrame.

    Parameters
    ----------
    df : pandas.DataFrame
        The table.  Its index is ignored.

    Returns
    -------
    list[list[BasicStringHashable]]
        The column labels as header followed by one row per DataFrame row.
        Values are converted with ``str``; missing values become empty
        strings.
    """
    header = [BasicStringHashable(str(c)) for c in df.columns]
    values = df.astype(object).where(df.notna(), "").to_numpy()
    return [header] + [[BasicStringHashable(str(v)) for v in row] for row in values]


def array_to_dataframe(array: Array) -> pd.DataFrame:
    """Build a DataFrame of canonical strings from an array.

    The header row gives the column labels.

    Raises
    ------
    ImproperArrayError
        If ``array`` is not well formed.
    """
    check_proper_array(array)
    columns = [string_hash(c) for c in array[0]]
    data = [[string_hash(c) for c in row] for row in array[1:]]
    return pd.DataFrame(data, columns=columns, dtype=object)
