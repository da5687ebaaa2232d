"""Type aliases for rowdiff.

This module defines type aliases used throughout the package for clarity
and consistency. The actual data structures are in core.py.
"""

from collections.abc import Sequence
from typing import Protocol, runtime_checkable


@runtime_checkable
class StringHashable(Protocol):
    """Anything that can be placed in a cell of an array.

    The only requirement is a canonical string form; equality of cells,
    column names and rows is decided on that string alone.
    """

    def string_hash(self) -> str:
        """Return the canonical string of the cell."""
        ...


Row = Sequence[StringHashable]
"""Alias for a single row of cells.

All rows of one array have the same length as its header.
"""

Array = Sequence[Row]
"""Alias for a table of cells.

Row 0 is the header holding the column names; the remaining rows are data.
"""

RowIndex = int
"""Alias for the position of a row within an array (the header is row 0)."""

ColName = StringHashable | str
"""Alias for column identifiers accepted by the column options.

Plain strings are accepted wherever a column name is expected and are
compared with a cell's canonical string.
"""
