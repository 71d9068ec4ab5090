"""Level-2 BLAS style kernels: gemver and gesummv."""

from __future__ import annotations

import numpy as np

from polykernels.common import Dataset

ALPHA = 1.5
BETA = 1.2

GEMVER_SIZES = {
    Dataset.MINI: 40,
    Dataset.SMALL: 120,
    Dataset.MEDIUM: 400,
    Dataset.LARGE: 2000,
    Dataset.XLARGE: 4000,
}

GESUMMV_SIZES = {
    Dataset.MINI: 30,
    Dataset.SMALL: 90,
    Dataset.MEDIUM: 250,
    Dataset.LARGE: 1300,
    Dataset.XLARGE: 2800,
}


def _square(value, name: str) -> np.ndarray:
    array = np.array(value, dtype=np.float64)
    if array.ndim != 2:
        raise ValueError(f"{name} must be two-dimensional, got {array.ndim} dimensions")
    if array.shape[0] != array.shape[1]:
        raise ValueError(f"{name} must be square, got shape {array.shape}")
    return array


def _vector(value, name: str, length: int) -> np.ndarray:
    array = np.array(value, dtype=np.float64)
    if array.ndim != 1:
        raise ValueError(f"{name} must be one-dimensional, got {array.ndim} dimensions")
    if array.shape[0] != length:
        raise ValueError(f"{name} has length {array.shape[0]}, expected {length}")
    return array


def init_gemver(n):
    """Inputs (A, u1, u2, v1, v2, y, z) for gemver; A is n x n, the rest length n."""
    fn = float(n)
    i = np.arange(n, dtype=np.float64)
    step = (i + 1) / fn
    u1 = i.copy()
    u2 = step / 2.0
    v1 = step / 4.0
    v2 = step / 6.0
    y = step / 8.0
    z = step / 9.0
    rows = np.arange(n)[:, None]
    cols = np.arange(n)[None, :]
    a = ((rows * cols) % n) / n
    return a.astype(np.float64), u1, u2, v1, v2, y, z


def gemver(a, u1, u2, v1, v2, y, z, alpha=ALPHA, beta=BETA):
    """Multiple matrix-vector products.

    Returns (A_hat, x, w) where A_hat = A + u1*v1^T + u2*v2^T,
    x = beta*A_hat^T*y + z and w = alpha*A_hat*x. The inputs are left unchanged.
    """
    a = _square(a, "A")
    n = a.shape[0]
    u1 = _vector(u1, "u1", n)
    u2 = _vector(u2, "u2", n)
    v1 = _vector(v1, "v1", n)
    v2 = _vector(v2, "v2", n)
    y = _vector(y, "y", n)
    z = _vector(z, "z", n)

    a_hat = a + np.outer(u1, v1) + np.outer(u2, v2)
    x = beta * (a_hat.T @ y) + z
    w = alpha * (a_hat @ x)
    return a_hat, x, w


def init_gesummv(n):
    """Inputs (A, B, x) for gesummv; A and B are n x n, x has length n."""
    rows = np.arange(n)[:, None]
    cols = np.arange(n)[None, :]
    a = (((rows * cols) % n) / n).astype(np.float64)
    b = a.copy()
    x = ((np.arange(n) % n) / n).astype(np.float64) if n else np.zeros(0)
    return a, b, x


def gesummv(a, b, x, alpha=ALPHA, beta=BETA):
    """Return alpha*A*x + beta*B*x. The inputs are left unchanged."""
    a = _square(a, "A")
    n = a.shape[0]
    b = _square(b, "B")
    if b.shape != a.shape:
        raise ValueError(f"B has shape {b.shape}, expected {a.shape}")
    x = _vector(x, "x", n)
    return alpha * (a @ x) + beta * (b @ x)