"""Matrix-vector kernels: atax, bicg and mvt."""

from __future__ import annotations

import numpy as np

from polykernels.common import Dataset

# (m, n) for atax and bicg.
_MN_SIZES = {
    Dataset.MINI: (38, 42),
    Dataset.SMALL: (116, 124),
    Dataset.MEDIUM: (390, 410),
    Dataset.LARGE: (1900, 2100),
    Dataset.XLARGE: (1800, 2200),
}
ATAX_SIZES = dict(_MN_SIZES)
BICG_SIZES = dict(_MN_SIZES)

MVT_SIZES = {
    Dataset.MINI: 40,
    Dataset.SMALL: 120,
    Dataset.MEDIUM: 400,
    Dataset.LARGE: 2000,
    Dataset.XLARGE: 4000,
}


def _matrix(value, name: str) -> np.ndarray:
    array = np.array(value, dtype=np.float64)
    if array.ndim != 2:
        raise ValueError(f"{name} must be two-dimensional, got {array.ndim} dimensions")
    return array


def _vector(value, name: str, length: int) -> np.ndarray:
    array = np.array(value, dtype=np.float64)
    if array.ndim != 1:
        raise ValueError(f"{name} must be one-dimensional, got {array.ndim} dimensions")
    if array.shape[0] != length:
        raise ValueError(f"{name} has length {array.shape[0]}, expected {length}")
    return array


def init_atax(m, n):
    """Inputs (A, x) for atax: A is m x n, x has length n."""
    x = 1.0 + np.arange(n, dtype=np.float64) / float(n)
    rows = np.arange(m)[:, None]
    cols = np.arange(n)[None, :]
    a = ((rows + cols) % n) / (5 * m)
    return a.astype(np.float64), x


def atax(a, x):
    """Return A^T*(A*x). The inputs are left unchanged."""
    a = _matrix(a, "A")
    x = _vector(x, "x", a.shape[1])
    return a.T @ (a @ x)


def init_bicg(m, n):
    """Inputs (A, p, r) for bicg: A is n x m, p has length m, r has length n."""
    p = ((np.arange(m) % m) / m).astype(np.float64) if m else np.zeros(0)
    r = ((np.arange(n) % n) / n).astype(np.float64) if n else np.zeros(0)
    rows = np.arange(n)[:, None]
    cols = np.arange(m)[None, :]
    a = ((rows * (cols + 1)) % n) / n if n else np.zeros((0, m))
    return np.asarray(a, dtype=np.float64), p, r


def bicg(a, p, r):
    """BiCG sub-kernel: returns (q, s) with q = A*p and s = A^T*r.

    The inputs are left unchanged.
    """
    a = _matrix(a, "A")
    n, m = a.shape
    p = _vector(p, "p", m)
    r = _vector(r, "r", n)
    return a @ p, a.T @ r


def init_mvt(n):
    """Inputs (A, y1, y2, x1, x2) for mvt: A is n x n, the vectors have length n."""
    i = np.arange(n)
    if n:
        x1 = ((i % n) / n).astype(np.float64)
        x2 = (((i + 1) % n) / n).astype(np.float64)
        y1 = (((i + 3) % n) / n).astype(np.float64)
        y2 = (((i + 4) % n) / n).astype(np.float64)
    else:
        x1 = x2 = y1 = y2 = np.zeros(0)
    rows = i[:, None]
    cols = i[None, :]
    a = ((rows * cols) % n) / n if n else np.zeros((0, 0))
    return np.asarray(a, dtype=np.float64), y1, y2, x1, x2


def mvt(a, y1, y2, x1, x2):
    """Return (x1 + A*y1, x2 + A^T*y2). The inputs are left unchanged."""
    a = _matrix(a, "A")
    n = a.shape[0]
    if a.shape != (n, n):
        raise ValueError(f"A must be square, got shape {a.shape}")
    y1 = _vector(y1, "y1", n)
    y2 = _vector(y2, "y2", n)
    x1 = _vector(x1, "x1", n)
    x2 = _vector(x2, "x2", n)
    return x1 + a @ y1, x2 + a.T @ y2