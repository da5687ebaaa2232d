"""Tests for the row pairing algorithms."""

import numpy as np
import pytest

from rowdiff import (
    ConfigurationError,
    Method,
    array_from_strings,
    build_index,
    get_common_indices,
    get_different_indices,
    row_keys,
)


@pytest.fixture
def duplicates(parse):
    """Like array2 with one 4,5,6 fewer and one 7,8,9 more."""
    return parse(
        """
a,b,c
10,10,10
4,5,6
4,5,6
1,2,3
7,8,9
7,8,9
"""
    )


@pytest.fixture
def positional(parse):
    """Shares rows 0, 1, 3 and 5 with array2 at the same positions."""
    return parse(
        """
a,b,c
10,10,10
0,0,0
4,5,6
1,2,3
1,2,3
0,0,0
"""
    )


@pytest.fixture
def headerless():
    """Data rows only, starting with a repeated row."""
    return array_from_strings(
        [["4", "5", "6"], ["4", "5", "6"], ["10", "10", "10"], ["11", "11", "11"]]
    )


def random_array(rng, n_rows, n_cols=3, limit=4):
    """Small random table of digits, so that duplicate rows are frequent."""
    values = rng.integers(0, limit, size=(n_rows, n_cols)).astype(str)
    return array_from_strings(values.tolist())


class TestCommonIndices:
    """Test common indices for every method."""

    @pytest.mark.parametrize("method", list(Method))
    def test_one_empty(self, array1, method):
        assert get_common_indices([], array1, method, True) == ([], [])

    def test_match_duplicates(self, array2, duplicates):
        indices1, indices2 = get_common_indices(array2, duplicates, Method.MATCH, True)
        assert indices1 == [0, 1, 2, 3, 5, 6]
        assert indices2 == [0, 1, 2, 3, 4, 5]

    def test_direct_same_positions(self, array2, positional):
        indices1, indices2 = get_common_indices(array2, positional, Method.DIRECT, True)
        assert indices1 == [0, 1, 3, 5]
        assert indices2 == [0, 1, 3, 5]

    def test_set_ignores_counts(self, array2, headerless):
        indices1, indices2 = get_common_indices(array2, headerless, Method.SET, True)
        assert indices1 == [1, 2, 3, 4]
        assert indices2 == [0, 1, 2]

    def test_unsorted_groups_follow_first_side(self, array2, duplicates):
        indices1, indices2 = get_common_indices(array2, duplicates, "match")
        assert indices1 == [0, 1, 2, 3, 5, 6]
        assert indices2 == [0, 1, 2, 3, 4, 5]

        _, indices2 = get_common_indices(duplicates[::-1], array2, "set")
        # Groups of 7,8,9 then 1,2,3 then 4,5,6 then 10,10,10 then header.
        assert indices2 == [6, 5, 2, 3, 4, 1, 0]

    def test_string_method(self, array2, duplicates):
        assert get_common_indices(array2, duplicates, "set", True) == (
            get_common_indices(array2, duplicates, Method.SET, True)
        )

    def test_unknown_method(self, array1):
        with pytest.raises(ConfigurationError, match="unsupported method"):
            get_common_indices(array1, array1, "fuzzy")


class TestDifferentIndices:
    """Test different indices for every method."""

    @pytest.mark.parametrize("method", list(Method))
    def test_one_empty(self, array1, method):
        assert get_different_indices([], array1, method, True) == ([], [0, 1, 2, 3])

    def test_match_duplicates(self, array2, duplicates):
        indices1, indices2 = get_different_indices(
            array2, duplicates, Method.MATCH, True
        )
        assert indices1 == [4]
        assert indices2 == [6]

    def test_direct_same_positions(self, array2, positional):
        indices1, indices2 = get_different_indices(
            array2, positional, Method.DIRECT, True
        )
        assert indices1 == [2, 4, 6]
        assert indices2 == [2, 4, 6]

    def test_direct_tail_belongs_to_longer_side(self, array1, array2):
        indices1, indices2 = get_different_indices(array1, array2, Method.DIRECT, True)
        assert indices1 == [1, 3]
        assert indices2 == [1, 3, 4, 5, 6]

    def test_set_ignores_counts(self, array2, headerless):
        indices1, indices2 = get_different_indices(array2, headerless, Method.SET, True)
        assert indices1 == [0, 5, 6]
        assert indices2 == [3]

    def test_unknown_method(self, array1):
        with pytest.raises(ConfigurationError, match="unsupported method"):
            get_different_indices(array1, array1, "fuzzy")


class TestProperties:
    """Invariants checked over random tables."""

    @pytest.fixture
    def pairs(self):
        rng = np.random.default_rng(7)
        sizes = rng.integers(0, 30, size=(25, 2))
        return [(random_array(rng, n1), random_array(rng, n2)) for n1, n2 in sizes]

    def test_match_is_complete(self, pairs):
        for arr1, arr2 in pairs:
            common1, common2 = get_common_indices(arr1, arr2, Method.MATCH, True)
            different1, different2 = get_different_indices(
                arr1, arr2, Method.MATCH, True
            )
            assert sorted(common1 + different1) == list(range(len(arr1)))
            assert sorted(common2 + different2) == list(range(len(arr2)))
            assert len(common1) == len(common2)

    def test_match_pairs_equal_rows(self, pairs):
        for arr1, arr2 in pairs:
            common1, common2 = get_common_indices(arr1, arr2, Method.MATCH)
            for i, j in zip(common1, common2):
                assert arr1[i] == arr2[j]

    def test_direct_tail_only_in_different(self, pairs):
        for arr1, arr2 in pairs:
            n = min(len(arr1), len(arr2))
            common1, common2 = get_common_indices(arr1, arr2, Method.DIRECT, True)
            different1, different2 = get_different_indices(
                arr1, arr2, Method.DIRECT, True
            )
            assert all(i < n for i in common1 + common2)
            longer, shorter = (
                (different1, different2)
                if len(arr1) >= len(arr2)
                else (different2, different1)
            )
            assert [i for i in longer if i >= n] == list(
                range(n, max(len(arr1), len(arr2)))
            )
            assert all(i < n for i in shorter)

    def test_set_membership(self, pairs):
        for arr1, arr2 in pairs:
            keys1 = row_keys(arr1)
            present2 = set(build_index(arr2))
            common1, _ = get_common_indices(arr1, arr2, Method.SET, True)
            different1, _ = get_different_indices(arr1, arr2, Method.SET, True)
            assert common1 == [i for i, k in enumerate(keys1) if k in present2]
            assert different1 == [i for i, k in enumerate(keys1) if k not in present2]

    def test_set_never_reports_count_imbalance(self):
        arr1 = array_from_strings([["1"], ["1"], ["1"]])
        arr2 = array_from_strings([["1"]])
        assert get_common_indices(arr1, arr2, Method.SET) == ([0, 1, 2], [0])
        assert get_different_indices(arr1, arr2, Method.SET) == ([], [])
        assert get_different_indices(arr1, arr2, Method.MATCH) == ([1, 2], [])
