import numpy as np
import pytest

from polykernels.blas2 import (
    ALPHA,
    BETA,
    GEMVER_SIZES,
    GESUMMV_SIZES,
    gemver,
    gesummv,
    init_gemver,
    init_gesummv,
)
from polykernels.common import Dataset


def test_init_gemver_structure():
    a, u1, u2, v1, v2, y, z = init_gemver(5)
    assert a.shape == (5, 5)
    np.testing.assert_array_equal(u1, np.arange(5))
    np.testing.assert_allclose(a, a.T)
    np.testing.assert_array_equal(a[0], np.zeros(5))
    np.testing.assert_allclose(u2, 2 * v1)
    np.testing.assert_allclose(v1, 1.5 * v2)
    np.testing.assert_allclose(y * 8, z * 9)
    assert u2[-1] == pytest.approx(0.5)


def test_init_gemver_dataset_values_in_unit_range():
    n = GEMVER_SIZES[Dataset.MINI]
    a, *_ = init_gemver(n)
    assert a.shape == (n, n)
    assert a.min() >= 0.0
    assert a.max() < 1.0


def test_gemver_identity_without_updates():
    n = 4
    zeros = np.zeros(n)
    y = np.array([1.0, 2.0, 3.0, 4.0])
    z = np.array([0.5, -1.0, 0.0, 2.0])
    a_hat, x, w = gemver(np.eye(n), zeros, zeros, zeros, zeros, y, z)
    np.testing.assert_allclose(a_hat, np.eye(n))
    np.testing.assert_allclose(x, BETA * y + z)
    np.testing.assert_allclose(w, ALPHA * x)


def test_gemver_uses_transpose_for_x():
    a = np.array([[0.0, 1.0], [0.0, 0.0]])
    zeros = np.zeros(2)
    y = np.array([1.0, 0.0])
    a_hat, x, w = gemver(a, zeros, zeros, zeros, zeros, y, zeros)
    np.testing.assert_allclose(a_hat, a)
    np.testing.assert_allclose(x, [0.0, BETA])
    np.testing.assert_allclose(w, [ALPHA * BETA, 0.0])


def test_gemver_rank_one_update():
    n = 3
    e0 = np.array([1.0, 0.0, 0.0])
    e1 = np.array([0.0, 1.0, 0.0])
    zeros = np.zeros(n)
    a_hat, _, _ = gemver(np.zeros((n, n)), e0, zeros, e1, zeros, zeros, zeros)
    expected = np.zeros((n, n))
    expected[0, 1] = 1.0
    np.testing.assert_allclose(a_hat, expected)


def test_gemver_custom_scalars():
    a, u1, u2, v1, v2, y, z = init_gemver(6)
    _, x, w = gemver(a, u1, u2, v1, v2, y, z, alpha=0.0, beta=0.0)
    np.testing.assert_allclose(x, z)
    np.testing.assert_allclose(w, np.zeros(6))


def test_gemver_leaves_inputs_unchanged():
    inputs = init_gemver(7)
    copies = [arr.copy() for arr in inputs]
    gemver(*inputs)
    for original, copy in zip(inputs, copies):
        np.testing.assert_array_equal(original, copy)


def test_gemver_rejects_non_square():
    v = np.zeros(3)
    with pytest.raises(ValueError):
        gemver(np.zeros((3, 2)), v, v, v, v, v, v)


def test_gemver_rejects_wrong_vector_length():
    v = np.zeros(3)
    with pytest.raises(ValueError):
        gemver(np.zeros((3, 3)), v, v, v, v, np.zeros(2), v)


def test_init_gesummv_structure():
    a, b, x = init_gesummv(6)
    np.testing.assert_array_equal(a, b)
    np.testing.assert_allclose(a, a.T)
    np.testing.assert_allclose(x, np.arange(6) / 6)
    np.testing.assert_array_equal(a[:, 0], np.zeros(6))


def test_gesummv_identity():
    x = np.array([1.0, -2.0, 3.0])
    y = gesummv(np.eye(3), np.eye(3), x)
    np.testing.assert_allclose(y, (ALPHA + BETA) * x)


def test_gesummv_is_linear_in_x():
    n = GESUMMV_SIZES[Dataset.MINI]
    a, b, x = init_gesummv(n)
    x2 = np.linspace(-1.0, 1.0, n)
    np.testing.assert_allclose(
        gesummv(a, b, x + 2 * x2),
        gesummv(a, b, x) + 2 * gesummv(a, b, x2),
    )


def test_gesummv_scalars_select_matrix():
    a = np.array([[1.0, 2.0], [3.0, 4.0]])
    b = np.array([[5.0, 6.0], [7.0, 8.0]])
    x = np.array([1.0, 0.0])
    np.testing.assert_allclose(gesummv(a, b, x, alpha=1.0, beta=0.0), a[:, 0])
    np.testing.assert_allclose(gesummv(a, b, x, alpha=0.0, beta=1.0), b[:, 0])


def test_gesummv_rejects_mismatched_shapes():
    with pytest.raises(ValueError):
        gesummv(np.eye(3), np.eye(2), np.zeros(3))
    with pytest.raises(ValueError):
        gesummv(np.eye(3), np.eye(3), np.zeros(4))