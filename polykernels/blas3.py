"""Level-3 BLAS style kernels: gemm, symm, syr2k, syrk and trmm."""

from __future__ import annotations

import numpy as np

from polykernels.common import Dataset

ALPHA = 1.5
BETA = 1.2

# (ni, nj, nk): A is ni x nk, B is nk x nj, C is ni x nj.
GEMM_SIZES = {
    Dataset.MINI: (20, 25, 30),
    Dataset.SMALL: (60, 70, 80),
    Dataset.MEDIUM: (200, 220, 240),
    Dataset.LARGE: (1000, 1100, 1200),
    Dataset.XLARGE: (2000, 2300, 2600),
}

# (m, n) shared by symm, syr2k, syrk and trmm.
_MN_SIZES = {
    Dataset.MINI: (20, 30),
    Dataset.SMALL: (60, 80),
    Dataset.MEDIUM: (200, 240),
    Dataset.LARGE: (1000, 1200),
    Dataset.XLARGE: (2000, 2600),
}
SYMM_SIZES = dict(_MN_SIZES)
SYR2K_SIZES = dict(_MN_SIZES)
SYRK_SIZES = dict(_MN_SIZES)
TRMM_SIZES = dict(_MN_SIZES)

# Value written into the parts of symm's A that the kernel must never read.
UNUSED_MARKER = -999.0


def _matrix(value, name: str) -> np.ndarray:
    array = np.array(value, dtype=np.float64)
    if array.ndim != 2:
        raise ValueError(f"{name} must be two-dimensional, got {array.ndim} dimensions")
    return array


def _require_shape(array: np.ndarray, shape: tuple[int, int], name: str) -> None:
    if array.shape != shape:
        raise ValueError(f"{name} has shape {array.shape}, expected {shape}")


def _indices(rows: int, cols: int) -> tuple[np.ndarray, np.ndarray]:
    return np.arange(rows)[:, None], np.arange(cols)[None, :]


def init_gemm(ni, nj, nk):
    """Inputs (A, B, C) for gemm: A is ni x nk, B is nk x nj, C is ni x nj."""
    i, j = _indices(ni, nj)
    c = ((i * j) % ni) / ni
    i, j = _indices(ni, nk)
    a = ((i * (j + 1)) % nk) / nk
    i, j = _indices(nk, nj)
    b = ((i * (j + 2)) % nj) / nj
    return a.astype(np.float64), b.astype(np.float64), c.astype(np.float64)


def gemm(a, b, c, alpha=ALPHA, beta=BETA):
    """Return alpha*A*B + beta*C. The inputs are left unchanged."""
    a = _matrix(a, "A")
    b = _matrix(b, "B")
    c = _matrix(c, "C")
    if a.shape[1] != b.shape[0]:
        raise ValueError(f"A has {a.shape[1]} columns but B has {b.shape[0]} rows")
    _require_shape(c, (a.shape[0], b.shape[1]), "C")
    return beta * c + alpha * (a @ b)


def init_symm(m, n):
    """Inputs (A, B, C) for symm: A is m x m (lower triangle used), B and C are m x n."""
    i, j = _indices(m, n)
    c = ((i + j) % 100) / m
    b = ((n + i - j) % 100) / m
    i, j = _indices(m, m)
    a = np.where(j <= i, ((i + j) % 100) / m, UNUSED_MARKER)
    return a.astype(np.float64), b.astype(np.float64), c.astype(np.float64)


def symm(a, b, c, alpha=ALPHA, beta=BETA):
    """Return alpha*A*B + beta*C for symmetric A given by its lower triangle.

    The strict upper triangle of ``a`` is never read. The inputs are left
    unchanged.
    """
    a = _matrix(a, "A")
    b = _matrix(b, "B")
    c = _matrix(c, "C")
    m = a.shape[0]
    _require_shape(a, (m, m), "A")
    if b.shape[0] != m:
        raise ValueError(f"B has {b.shape[0]} rows, expected {m}")
    _require_shape(c, b.shape, "C")
    strict_lower = np.tril(a, -1)
    symmetric = strict_lower + strict_lower.T + np.diag(np.diag(a))
    return beta * c + alpha * (symmetric @ b)


def init_syr2k(m, n):
    """Inputs (A, B, C) for syr2k: A and B are n x m, C is n x n."""
    i, j = _indices(n, m)
    a = ((i * j) % n) / n
    b = ((i * j) % m) / m
    i, j = _indices(n, n)
    c = ((i * j) % n) / m
    return a.astype(np.float64), b.astype(np.float64), c.astype(np.float64)


def syr2k(a, b, c, alpha=ALPHA, beta=BETA):
    """Symmetric rank-2k update of the lower triangle of C.

    The lower triangle becomes alpha*(A*B^T + B*A^T) + beta*C; the strict
    upper triangle is copied unchanged. The inputs are left unchanged.
    """
    a = _matrix(a, "A")
    b = _matrix(b, "B")
    c = _matrix(c, "C")
    _require_shape(b, a.shape, "B")
    n = a.shape[0]
    _require_shape(c, (n, n), "C")
    updated = beta * c + alpha * (b @ a.T + a @ b.T)
    lower = np.tril(np.ones((n, n), dtype=bool))
    return np.where(lower, updated, c)


def init_syrk(m, n):
    """Inputs (A, C) for syrk: A is n x m, C is n x n."""
    i, j = _indices(n, m)
    a = ((i * j) % n) / n
    i, j = _indices(n, n)
    c = ((i * j) % m) / m
    return a.astype(np.float64), c.astype(np.float64)


def syrk(a, c, alpha=ALPHA, beta=BETA):
    """Symmetric rank-k update of the lower triangle of C.

    The lower triangle becomes alpha*A*A^T + beta*C; the strict upper triangle
    is copied unchanged. The inputs are left unchanged.
    """
    a = _matrix(a, "A")
    c = _matrix(c, "C")
    n = a.shape[0]
    _require_shape(c, (n, n), "C")
    updated = beta * c + alpha * (a @ a.T)
    lower = np.tril(np.ones((n, n), dtype=bool))
    return np.where(lower, updated, c)


def init_trmm(m, n):
    """Inputs (A, B) for trmm: A is m x m unit lower triangular, B is m x n."""
    i, j = _indices(m, m)
    a = np.where(j < i, ((i + j) % m) / m, 0.0)
    np.fill_diagonal(a, 1.0)
    i, j = _indices(m, n)
    b = ((n + (i - j)) % n) / n
    return a.astype(np.float64), b.astype(np.float64)


def trmm(a, b, alpha=ALPHA):
    """Return alpha*A^T*B for A unit lower triangular.

    Only the strict lower triangle of ``a`` is read; its diagonal is taken to
    be one. The inputs are left unchanged.
    """
    a = _matrix(a, "A")
    b = _matrix(b, "B")
    m = a.shape[0]
    _require_shape(a, (m, m), "A")
    if b.shape[0] != m:
        raise ValueError(f"B has {b.shape[0]} rows, expected {m}")
    return alpha * (b + np.tril(a, -1).T @ b)