"""Shared helpers for the kernels: dataset sizes, buffer comparison and timing."""

from __future__ import annotations

import enum
import statistics
from collections.abc import Iterable

import numpy as np

NB_TESTS = 10
DEFAULT_THRESHOLD = 0.1


class Dataset(enum.Enum):
    """Problem-size classes shared by every kernel."""

    MINI = "mini"
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    XLARGE = "xlarge"


class BufferMismatchError(AssertionError):
    """Raised when a result buffer differs from the expected one."""

    def __init__(self, test, message, index=None, expected=None, got=None):
        super().__init__(message)
        self.test = test
        self.index = index
        self.expected = expected
        self.got = got


def compare_buffers_approximately(test, result, expected, threshold=DEFAULT_THRESHOLD):
    """Check that two buffers agree element-wise within ``threshold``.

    Returns the success message; raises :class:`BufferMismatchError` on a shape
    mismatch or at the first element that differs by more than ``threshold``.
    """
    result = np.asarray(result, dtype=np.float64)
    expected = np.asarray(expected, dtype=np.float64)

    if result.shape != expected.shape:
        raise BufferMismatchError(
            test,
            f"Test {test}: result has shape {result.shape}, expected {expected.shape}",
        )

    too_far = np.abs(result - expected).astype(np.float32) > np.float32(threshold)
    if too_far.any():
        index = tuple(int(i) for i in np.argwhere(too_far)[0])
        want = float(expected[index])
        got = float(result[index])
        raise BufferMismatchError(
            test,
            f"Test {test} failed. At {index}, expected: {want:f}, got: {got:f}.",
            index=index,
            expected=want,
            got=got,
        )
    return f"Test {test} succeeded."


def transpose(buf):
    """Reverse the order of a buffer's dimensions without moving any data."""
    array = np.asarray(buf)
    if array.ndim < 2:
        return array
    return array.T


def median(durations: Iterable[float]) -> float:
    """Median of a sequence of timings."""
    values = list(durations)
    if not values:
        raise ValueError("median of an empty sequence")
    return statistics.median(values)