"""Chained matrix-product kernels: 2mm, 3mm and doitgen."""

from __future__ import annotations

import numpy as np

from polykernels.common import Dataset

ALPHA = 1.5
BETA = 1.2

# (ni, nj, nk, nl): A is ni x nk, B is nk x nj, C is nj x nl, D is ni x nl.
TWO_MM_SIZES = {
    Dataset.MINI: (16, 18, 22, 24),
    Dataset.SMALL: (40, 50, 70, 80),
    Dataset.MEDIUM: (180, 190, 210, 220),
    Dataset.LARGE: (800, 900, 1100, 1200),
    Dataset.XLARGE: (1600, 1800, 2200, 2400),
}

# (ni, nj, nk, nl, nm): A is ni x nk, B is nk x nj, C is nj x nm, D is nm x nl.
THREE_MM_SIZES = {
    Dataset.MINI: (16, 18, 20, 22, 24),
    Dataset.SMALL: (40, 50, 60, 70, 80),
    Dataset.MEDIUM: (180, 190, 200, 210, 220),
    Dataset.LARGE: (800, 900, 1000, 1100, 1200),
    Dataset.XLARGE: (1600, 1800, 2000, 2200, 2400),
}

# (nr, nq, np): A is nr x nq x np, x is np x np.
DOITGEN_SIZES = {
    Dataset.MINI: (10, 8, 12),
    Dataset.SMALL: (25, 20, 30),
    Dataset.MEDIUM: (50, 40, 60),
    Dataset.LARGE: (150, 140, 160),
    Dataset.XLARGE: (250, 220, 270),
}


def _matrix(value, name: str) -> np.ndarray:
    array = np.array(value, dtype=np.float64)
    if array.ndim != 2:
        raise ValueError(f"{name} must be two-dimensional, got {array.ndim} dimensions")
    return array


def _require_chain(left: np.ndarray, right: np.ndarray, left_name: str, right_name: str) -> None:
    if left.shape[1] != right.shape[0]:
        raise ValueError(
            f"{left_name} has {left.shape[1]} columns but {right_name} has {right.shape[0]} rows"
        )


def _grid(rows: int, cols: int) -> tuple[np.ndarray, np.ndarray]:
    return np.arange(rows)[:, None], np.arange(cols)[None, :]


def _filled(rows: int, cols: int, numerator, divisor: int) -> np.ndarray:
    i, j = _grid(rows, cols)
    if rows == 0 or cols == 0:
        return np.zeros((rows, cols), dtype=np.float64)
    return (numerator(i, j) % divisor / divisor).astype(np.float64)


def init_2mm(ni, nj, nk, nl):
    """Inputs (A, B, C, D) for 2mm."""
    a = _filled(ni, nk, lambda i, j: i * j, ni)
    b = _filled(nk, nj, lambda i, j: i * (j + 1), nj)
    c = _filled(nj, nl, lambda i, j: i * (j + 3), nl)
    d = _filled(ni, nl, lambda i, j: i * (j + 2), nk)
    return a, b, c, d


def two_mm(a, b, c, d, alpha=ALPHA, beta=BETA):
    """Return alpha*A*B*C + beta*D. The inputs are left unchanged."""
    a = _matrix(a, "A")
    b = _matrix(b, "B")
    c = _matrix(c, "C")
    d = _matrix(d, "D")
    _require_chain(a, b, "A", "B")
    _require_chain(b, c, "B", "C")
    if d.shape != (a.shape[0], c.shape[1]):
        raise ValueError(f"D has shape {d.shape}, expected {(a.shape[0], c.shape[1])}")
    tmp = alpha * (a @ b)
    return beta * d + tmp @ c


def init_3mm(ni, nj, nk, nl, nm):
    """Inputs (A, B, C, D) for 3mm."""
    def scaled(rows, cols, numerator, divisor):
        return _filled(rows, cols, numerator, divisor) / 5.0

    a = scaled(ni, nk, lambda i, j: i * j, ni)
    b = scaled(nk, nj, lambda i, j: i * (j + 1), nj)
    c = scaled(nj, nm, lambda i, j: i * (j + 3), nl)
    d = scaled(nm, nl, lambda i, j: i * (j + 2), nk)
    return a, b, c, d


def three_mm(a, b, c, d):
    """Return (A*B)*(C*D). The inputs are left unchanged."""
    a = _matrix(a, "A")
    b = _matrix(b, "B")
    c = _matrix(c, "C")
    d = _matrix(d, "D")
    _require_chain(a, b, "A", "B")
    _require_chain(c, d, "C", "D")
    e = a @ b
    f = c @ d
    _require_chain(e, f, "A*B", "C*D")
    return e @ f


def _doitgen_inputs(nr: int, nq: int, npp: int) -> tuple[np.ndarray, np.ndarray]:
    r = np.arange(nr)[:, None, None]
    q = np.arange(nq)[None, :, None]
    p = np.arange(npp)[None, None, :]
    if npp == 0:
        return np.zeros((nr, nq, 0)), np.zeros((0, 0))
    a = (((r * q + p) % npp) / npp).astype(np.float64)
    x = _filled(npp, npp, lambda i, j: i * j, npp)
    return a, x


def init_doitgen(nr, nq, np):
    """Inputs (A, x) for doitgen: A is nr x nq x np, x is np x np."""
    return _doitgen_inputs(nr, nq, np)


def doitgen(a, x):
    """Multiresolution kernel: A_out[r, q, p] = sum_s A[r, q, s] * x[s, p].

    The inputs are left unchanged.
    """
    a = np.array(a, dtype=np.float64)
    if a.ndim != 3:
        raise ValueError(f"A must be three-dimensional, got {a.ndim} dimensions")
    x = _matrix(x, "x")
    size = a.shape[2]
    if x.shape != (size, size):
        raise ValueError(f"x has shape {x.shape}, expected {(size, size)}")
    return a @ x