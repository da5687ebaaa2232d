"""Text rendering of arrays."""

from .arrays import check_proper_array
from .core import TRUNCATED_MARK, ConfigurationError, string_hash
from .types import Array


def _truncate(text: str, max_length: int) -> str:
    if len(text) > max_length:
        return text[:max_length] + TRUNCATED_MARK
    return text


def pretty_format(array: Array, spaces: int = 2, max_col_length: int = -1) -> str:
    """Render an array as text with its columns lined up.

    Every column but the last is padded to the width of its widest cell
    plus ``spaces``.  Cells longer than ``max_col_length`` are cut to that
    length and followed by :data:`~rowdiff.core.TRUNCATED_MARK`.  Each row
    ends with a newline.

    Parameters
    ----------
    array : Array
        A well formed array.
    spaces : int, default 2
        Minimum number of spaces between two columns.
    max_col_length : int, default -1
        Longest cell text shown in full.  Negative values disable
        truncation.

    Returns
    -------
    str
        The rendered table.

    Raises
    ------
    ImproperArrayError
        If ``array`` is not well formed.
    ConfigurationError
        If ``spaces`` is negative.
    """
    check_proper_array(array)
    if spaces < 0:
        raise ConfigurationError("spaces must be non-negative")

    rows = [[string_hash(c) for c in row] for row in array]
    width = len(rows[0])
    widths = [max(len(row[j]) for row in rows) for j in range(width)]
    if max_col_length >= 0:
        truncated_width = max_col_length + len(TRUNCATED_MARK)
        widths = [truncated_width if w > max_col_length else w for w in widths]
        rows = [[_truncate(s, max_col_length) for s in row] for row in rows]

    lines = []
    for row in rows:
        padded = [s.ljust(widths[j] + spaces) for j, s in enumerate(row[:-1])]
        lines.append("".join(padded + row[-1:]) + "\n")
    return "".join(lines)


def string_format(array: Array) -> str:
    """Render an array as comma separated lines.

    No quoting is applied, so cells containing commas or newlines do not
    survive a round trip through a CSV parser.

    Raises
    ------
    ImproperArrayError
        If ``array`` is not well formed.
    """
    check_proper_array(array)
    return "".join(",".join(string_hash(c) for c in row) + "\n" for row in array)
