"""Shared test fixtures for rowdiff tests."""

import io

import pandas as pd
import pytest

from rowdiff import array_from_dataframe, array_from_strings


def _parse(text):
    """Build an array from CSV text, read as strings by pandas.

    The first line is the header. pandas renames repeated column names, so
    arrays with a repeated column are built with ``array_from_strings``.
    """
    df = pd.read_csv(io.StringIO(text.strip()), dtype=str, keep_default_na=False)
    return array_from_dataframe(df)


@pytest.fixture
def array1():
    """Three distinct data rows."""
    return _parse(
        """
a,b,c
1,2,3
4,5,6
7,8,9
"""
    )


@pytest.fixture
def array2():
    """Same columns as array1, with a repeated row and an extra row."""
    return _parse(
        """
a,b,c
10,10,10
4,5,6
4,5,6
4,5,6
1,2,3
7,8,9
"""
    )


@pytest.fixture
def array3():
    """array1 with an extra column."""
    return _parse(
        """
a,b,c,d
1,2,3,a
4,5,6,b
7,8,9,c
"""
    )


@pytest.fixture
def improper_arrays():
    """Arrays that are empty, repeat a column name, or have ragged rows."""
    ragged = array_from_strings(
        [["a", "b", "c"], ["1", "2", "3", "5"], ["4", "5", "6"], ["7", "8", "9", "2"]]
    )
    repeated = array_from_strings(
        [["a", "b", "c", "c"], ["1", "2", "3", "5"], ["4", "5", "6", "3"]]
    )
    return [[], repeated, ragged]


@pytest.fixture
def parse():
    """Build arrays from comma separated text."""
    return _parse
