import numpy as np
import pytest

from polykernels.datamining import (
    CORRELATION_SIZES,
    correlation,
    covariance,
    init_correlation,
    init_covariance,
)
from polykernels.common import Dataset


def _random_data(rows, cols, seed=0):
    rng = np.random.default_rng(seed)
    return rng.normal(scale=5.0, size=(rows, cols))


def test_init_correlation_shape_and_values():
    data = init_correlation(4, 6)
    assert data.shape == (6, 4)
    assert data[0, 0] == 0.0
    assert data[2, 3] == pytest.approx(3.5)


def test_correlation_matches_numpy():
    data = _random_data(50, 6)
    corr = correlation(data)
    assert np.allclose(corr, np.corrcoef(data, rowvar=False))


def test_correlation_is_symmetric_with_unit_diagonal():
    corr = correlation(_random_data(30, 5, seed=3))
    assert np.allclose(corr, corr.T)
    assert np.allclose(np.diag(corr), 1.0)
    assert np.all(np.abs(corr) <= 1.0 + 1e-12)


def test_correlation_of_init_data_is_all_ones():
    m, n = CORRELATION_SIZES[Dataset.MINI]
    corr = correlation(init_correlation(m, n))
    assert corr.shape == (m, m)
    assert np.allclose(corr, 1.0)


def test_correlation_constant_column_uses_unit_stddev():
    data = _random_data(20, 3, seed=1)
    data[:, 1] = 2.0
    corr = correlation(data)
    assert np.allclose(corr[1, [0, 2]], 0.0)
    assert corr[1, 1] == 1.0


def test_correlation_leaves_input_unchanged():
    data = _random_data(10, 4)
    before = data.copy()
    correlation(data)
    assert np.array_equal(data, before)


def test_correlation_rejects_non_matrix():
    with pytest.raises(ValueError):
        correlation(np.zeros(5))


def test_init_covariance_first_row_zero():
    data = init_covariance(5, 7)
    assert data.shape == (7, 5)
    assert np.array_equal(data[0], np.zeros(5))
    assert np.array_equal(data[:, 0], np.zeros(7))


def test_covariance_matches_numpy():
    data = _random_data(40, 5, seed=2)
    assert np.allclose(covariance(data), np.cov(data, rowvar=False))


def test_covariance_of_init_data_first_column_zero():
    cov = covariance(init_covariance(6, 9))
    assert np.allclose(cov, cov.T)
    assert np.allclose(cov[0], 0.0)
    assert np.all(np.diag(cov)[1:] > 0.0)


def test_covariance_leaves_input_unchanged():
    data = _random_data(8, 3)
    before = data.copy()
    covariance(data)
    assert np.array_equal(data, before)