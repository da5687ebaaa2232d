"""Tests for conversion between arrays and DataFrames."""

import io

import numpy as np
import pandas as pd
import pytest

from rowdiff import (
    BasicStringHashable,
    ImproperArrayError,
    Options,
    array_from_dataframe,
    array_from_strings,
    array_to_dataframe,
    get_different_rows,
    row_from_strings,
)


@pytest.fixture
def sample_df():
    """Sample DataFrame for testing."""
    return pd.DataFrame(
        {
            "id": [1, 2, 3],
            "name": ["x", None, "z"],
            "score": [1.5, np.nan, 3.0],
        }
    )


class TestFromStrings:
    """Test wrapping plain strings."""

    def test_row(self):
        row = row_from_strings(["a", "b"])
        assert row == ["a", "b"]
        assert all(isinstance(c, BasicStringHashable) for c in row)

    def test_array(self):
        array = array_from_strings([["a"], ["1"]])
        assert array == [["a"], ["1"]]
        assert isinstance(array[1][0], BasicStringHashable)

    def test_none_passes_through(self):
        assert row_from_strings(None) is None
        assert array_from_strings(None) is None


class TestDataFrame:
    """Test DataFrame conversion."""

    def test_from_dataframe(self, sample_df):
        array = array_from_dataframe(sample_df)

        assert array[0] == ["id", "name", "score"]
        assert array[1] == ["1", "x", "1.5"]
        assert array[2] == ["2", "", ""]
        assert all(isinstance(c, BasicStringHashable) for row in array for c in row)

    def test_from_empty_dataframe(self):
        array = array_from_dataframe(pd.DataFrame(columns=["a", "b"]))
        assert array == [["a", "b"]]

    def test_to_dataframe(self, parse):
        df = array_to_dataframe(parse("a,b\n1,2\n3,4"))

        assert list(df.columns) == ["a", "b"]
        assert df["b"].tolist() == ["2", "4"]

    def test_to_dataframe_header_only(self, parse):
        df = array_to_dataframe(parse("a,b"))
        assert list(df.columns) == ["a", "b"]
        assert len(df) == 0

    def test_to_dataframe_improper(self, improper_arrays):
        for array in improper_arrays:
            with pytest.raises(ImproperArrayError):
                array_to_dataframe(array)

    def test_compare_csv_text(self):
        old = io.StringIO("id,city\n1,Paris\n2,Lyon\n3,Nice\n")
        new = io.StringIO("city,id\nParis,1\nLille,2\nNice,3\n")
        array1 = array_from_dataframe(
            pd.read_csv(old, dtype=str, keep_default_na=False)
        )
        array2 = array_from_dataframe(
            pd.read_csv(new, dtype=str, keep_default_na=False)
        )

        result = get_different_rows(array1, array2, Options(sort_indices=True))

        assert result.indices1 == [0, 2]
        assert result.indices2 == [0, 2]
        assert array_to_dataframe(result.rows2)["city"].tolist() == ["Lille"]

    def test_csv_text_stays_text(self, parse):
        array = parse("code,flag,note\n007,NA,\n1.50,null,x")
        assert array == array_from_strings(
            [["code", "flag", "note"], ["007", "NA", ""], ["1.50", "null", "x"]]
        )
