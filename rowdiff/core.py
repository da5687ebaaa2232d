"""Core types and data structures for rowdiff.

This module defines the fundamental building blocks used throughout the rowdiff package:
- BasicStringHashable: The default cell type, a string that is its own canonical form
- RowKey: The hash identity of a row
- Method: The supported ways of pairing rows between two arrays
- Options: The per-call configuration of a row comparison
- ComparisonResult: The rows and original indices produced by a comparison
"""

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple

from .types import Array, ColName, RowIndex, StringHashable

# Appended to cells cut short by pretty formatting.
TRUNCATED_MARK = ".."


class RowDiffError(ValueError):
    """Base class for errors raised on invalid input to rowdiff."""


class ImproperArrayError(RowDiffError):
    """The array is empty, repeats a column name, or has a ragged row."""


class ConfigurationError(RowDiffError):
    """The options or column selections cannot be applied to the arrays."""


class BasicStringHashable(str):
    """A plain text cell whose canonical string is the text itself."""

    __slots__ = ()

    def string_hash(self) -> str:
        return str(self)


class RowKey(NamedTuple):
    """Hash identity of a row.

    Attributes
    ----------
    row : int
        64-bit hash of the row's canonical strings concatenated with no
        separator.
    lengths : int
        64-bit hash of the comma-joined lengths of those strings. Two rows
        whose cells split the same text at different places differ here.
    """

    row: int
    lengths: int


class Method(Enum):
    """Available methods for pairing the rows of two arrays."""

    MATCH = "match"
    DIRECT = "direct"
    SET = "set"

    @classmethod
    def coerce(cls, value: "Method | str") -> "Method":
        """Return ``value`` as a Method, accepting the member values as strings.

        Raises
        ------
        ConfigurationError
            If ``value`` names no supported method.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise ConfigurationError(f"unsupported method: {value!r}") from None


@dataclass
class Options:
    """Configuration of a row comparison.

    Attributes
    ----------
    method : Method or str, default Method.MATCH
        How rows of the two arrays are paired:

        - ``"match"``: equal rows are paired one to one, surplus
          duplicates are different
        - ``"direct"``: rows are compared position by position
        - ``"set"``: a row is common if an equal row exists on the other
          side at all
    use_columns : Sequence[ColName], optional
        Only these columns decide whether two rows are equal. Every name
        must exist in both arrays.
    ignore_columns : Sequence[ColName], optional
        These columns are left out when deciding whether two rows are
        equal. Cannot be combined with ``use_columns``.
    sort_indices : bool, default False
        Return the resulting indices in ascending order.
    """

    method: Method | str = Method.MATCH
    use_columns: Sequence[ColName] | None = None
    ignore_columns: Sequence[ColName] | None = None
    sort_indices: bool = False

    def check_attributes(self) -> None:
        """Validate the options.

        Raises
        ------
        ConfigurationError
            If the method is not supported or both ``use_columns`` and
            ``ignore_columns`` are given.
        """
        Method.coerce(self.method)
        if self.use_columns is not None and self.ignore_columns is not None:
            raise ConfigurationError(
                "cannot use both use_columns and ignore_columns together"
            )


class ComparisonResult(NamedTuple):
    """Rows selected by a comparison and their positions in the inputs.

    Attributes
    ----------
    rows1 : Array
        Selected rows of the first array, header first, full width.
    rows2 : Array
        Selected rows of the second array, header first, full width.
    indices1 : list[RowIndex]
        Position in the first array of each row of ``rows1``.
    indices2 : list[RowIndex]
        Position in the second array of each row of ``rows2``.
    """

    rows1: Array
    rows2: Array
    indices1: list[RowIndex]
    indices2: list[RowIndex]


def string_hash(value: ColName) -> str:
    """Return the canonical string of a cell.

    Plain ``str`` values, as cells or as column names, are their own
    canonical string.
    """
    if isinstance(value, StringHashable):
        return value.string_hash()
    return str(value)
