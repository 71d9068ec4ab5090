"""Correlation and covariance kernels over an N x M data matrix."""

from __future__ import annotations

import numpy as np

from polykernels.common import Dataset

EPS = 0.1

CORRELATION_SIZES = {
    Dataset.MINI: (28, 32),
    Dataset.SMALL: (80, 100),
    Dataset.MEDIUM: (240, 260),
    Dataset.LARGE: (1200, 1400),
    Dataset.XLARGE: (2600, 3000),
}

COVARIANCE_SIZES = dict(CORRELATION_SIZES)


def _as_data(data) -> np.ndarray:
    array = np.array(data, dtype=np.float64)
    if array.ndim != 2:
        raise ValueError(f"data must be two-dimensional, got {array.ndim} dimensions")
    return array


def init_correlation(m, n):
    """Input matrix of shape (n, m) with data[i, j] = i*j/m + i."""
    i = np.arange(n, dtype=np.float64)[:, None]
    j = np.arange(m, dtype=np.float64)[None, :]
    return (i * j) / m + i


def correlation(data, eps=EPS):
    """Pearson correlation matrix (m x m) of the columns of ``data``.

    Columns whose standard deviation is at most ``eps`` are treated as having
    a standard deviation of 1.0. The input is left unchanged.
    """
    data = _as_data(data)
    n, m = data.shape

    mean = data.sum(axis=0) / n
    stddev = np.sqrt(((data - mean) ** 2).sum(axis=0) / n)
    stddev = np.where(stddev <= eps, 1.0, stddev)

    reduced = (data - mean) / (np.sqrt(n) * stddev)
    corr = reduced.T @ reduced
    if m:
        np.fill_diagonal(corr, 1.0)
    return corr


def init_covariance(m, n):
    """Input matrix of shape (n, m) with data[i, j] = i*j/m."""
    i = np.arange(n, dtype=np.float64)[:, None]
    j = np.arange(m, dtype=np.float64)[None, :]
    return (i * j) / m


def covariance(data):
    """Sample covariance matrix (m x m) of the columns of ``data``.

    The input is left unchanged.
    """
    data = _as_data(data)
    n = data.shape[0]
    centered = data - data.sum(axis=0) / n
    with np.errstate(divide="ignore", invalid="ignore"):
        return (centered.T @ centered) / (n - 1.0)