"""Tests for triangular a_lm index arithmetic."""

import numpy as np
import pytest

from healpix_alm.alm import Alm
from healpix_alm.errors import InvalidBoundsError, MalformedTableError
from healpix_alm.indexing import (
    alm_index,
    alm_index_l0,
    alm_lm,
    lm_to_table_index,
    lmax_from_num_of_alm,
    number_of_alms,
    table_index_to_lm,
)


def _all_pairs(lmax, mmax):
    return [(l, m) for m in range(mmax + 1) for l in range(m, lmax + 1)]  # noqa: E741


def test_number_of_alms_single_coefficient():
    assert number_of_alms(0, 0) == 1
    assert number_of_alms(0) == 1


@pytest.mark.parametrize("lmax", range(10))
def test_number_of_alms_full_triangle(lmax):
    expected = (lmax + 1) * (lmax + 2) // 2
    assert number_of_alms(lmax, lmax) == expected
    assert number_of_alms(lmax) == expected


@pytest.mark.parametrize("lmax,mmax", [(4, 2), (6, 0), (3, 1), (10, 7)])
def test_number_of_alms_truncated_counts_pairs(lmax, mmax):
    assert number_of_alms(lmax, mmax) == len(_all_pairs(lmax, mmax))


@pytest.mark.parametrize("lmax,mmax", [(-1, 0), (2, -1), (2, 3), (0, 1)])
def test_number_of_alms_rejects_invalid_bounds(lmax, mmax):
    with pytest.raises(InvalidBoundsError):
        number_of_alms(lmax, mmax)


def test_invalid_bounds_is_value_error():
    with pytest.raises(ValueError):
        number_of_alms(-3)


def test_alm_index_lmax2_layout():
    alm = Alm(2)
    pairs = [(0, 0), (1, 0), (1, 1), (2, 0), (2, 1), (2, 2)]
    offsets = [alm_index(alm, l, m) for l, m in pairs]  # noqa: E741

    assert offsets == [0, 1, 3, 2, 4, 5]
    assert sorted(offsets) == list(range(6))


@pytest.mark.parametrize(
    "lmax,mmax", [(0, 0), (1, 1), (2, 2), (7, 7), (4, 2), (6, 0), (3, 1), (9, 5)]
)
def test_alm_index_is_bijection(lmax, mmax):
    alm = Alm(lmax, mmax)
    offsets = [alm_index(alm, l, m) for l, m in _all_pairs(lmax, mmax)]  # noqa: E741

    assert sorted(offsets) == list(range(number_of_alms(lmax, mmax)))


def test_alm_index_vectorized_matches_scalar():
    alm = Alm(6, 4)
    pairs = _all_pairs(6, 4)
    l = np.array([p[0] for p in pairs])  # noqa: E741
    m = np.array([p[1] for p in pairs])

    vectorized = alm_index(alm, l, m)

    assert isinstance(vectorized, np.ndarray)
    assert vectorized.tolist() == [alm_index(alm, *p) for p in pairs]


def test_alm_index_l0_uses_cached_tval():
    alm = Alm(5)
    assert alm.tval == 11
    assert alm_index_l0(alm, 0) == 0
    assert alm_index_l0(alm, 3) == (3 * (11 - 3)) // 2
    assert alm_index_l0(alm, np.array([1, 2])).tolist() == [5, 9]


def test_alm_lm_storage_order():
    l, m = alm_lm(2)  # noqa: E741
    assert l.tolist() == [0, 1, 2, 1, 2, 2]
    assert m.tolist() == [0, 0, 0, 1, 1, 2]


@pytest.mark.parametrize("lmax,mmax", [(3, 3), (5, 2), (4, 0)])
def test_alm_lm_matches_offsets(lmax, mmax):
    alm = Alm(lmax, mmax)
    l, m = alm_lm(lmax, mmax)  # noqa: E741
    assert np.array_equal(alm_index(alm, l, m), np.arange(len(alm)))


@pytest.mark.parametrize("lmax", range(12))
def test_lmax_from_num_of_alm_full_triangle(lmax):
    assert lmax_from_num_of_alm(number_of_alms(lmax)) == lmax


def test_lmax_from_num_of_alm_truncated():
    assert lmax_from_num_of_alm(12, mmax=2) == 4
    assert lmax_from_num_of_alm(number_of_alms(9, 5), mmax=5) == 9


@pytest.mark.parametrize("nalm,mmax", [(0, None), (5, None), (13, 2), (4, 2)])
def test_lmax_from_num_of_alm_rejects_invalid_sizes(nalm, mmax):
    with pytest.raises(InvalidBoundsError):
        lmax_from_num_of_alm(nalm, mmax)


def test_lm_to_table_index_values():
    assert lm_to_table_index(0, 0) == 1
    assert lm_to_table_index(1, 0) == 3
    assert lm_to_table_index(1, 1) == 4
    assert lm_to_table_index(2, 0) == 7
    assert lm_to_table_index(np.array([2, 2]), np.array([1, 2])).tolist() == [8, 9]


def test_table_index_to_lm_first_rows():
    l, m = table_index_to_lm([1, 2, 3, 4])  # noqa: E741
    assert l.tolist() == [0, 1, 1, 1]
    # index 2 is (l=1, m=-1), which the non-negative-order table never holds
    assert m.tolist() == [0, -1, 0, 1]


def test_table_index_round_trip_large_degrees():
    l = np.array([0, 1, 2, 10, 1000, 94906265, 2_000_000_000], dtype=np.int64)  # noqa: E741
    for m in (np.zeros_like(l), l // 3, l):
        l_back, m_back = table_index_to_lm(lm_to_table_index(l, m))
        assert np.array_equal(l_back, l)
        assert np.array_equal(m_back, m)


def test_table_index_to_lm_rejects_non_positive_index():
    with pytest.raises(MalformedTableError):
        table_index_to_lm([1, 0, 3])
