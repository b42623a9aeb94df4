"""
Gauss-Jordan solver tests.

Tests for:
- Round trip A @ solve(A, b) == b on well-conditioned systems
- Partial pivoting with a zero leading entry
- Near-singular pivots are skipped without raising
"""

import os
import sys

import numpy as np
import pytest

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from ml_from_scratch.linear_solver import gaussian_solve


def test_round_trip_random_systems():
    """Solution satisfies A x = b for random diagonally dominant matrices."""
    print("=" * 60)
    print("TEST: Solver Round Trip")
    print("=" * 60)

    rng = np.random.default_rng(42)
    for n in (1, 2, 3, 5, 8):
        A = rng.normal(size=(n, n)) + n * np.eye(n)
        b = rng.normal(size=n)

        x = gaussian_solve(A, b)

        assert x.shape == (n,)
        assert np.allclose(A @ x, b, atol=1e-6)
        print(f"  n={n}: residual={np.max(np.abs(A @ x - b)):.2e}")


def test_zero_leading_entry_needs_pivoting():
    A = [[0.0, 1.0], [1.0, 0.0]]
    b = [2.0, 3.0]

    x = gaussian_solve(A, b)

    assert x == pytest.approx([3.0, 2.0])


def test_singular_system_skips_row():
    """Second row reduces to zeros; the call still returns a vector."""
    A = [[1.0, 2.0], [2.0, 4.0]]
    b = [3.0, 6.0]

    x = gaussian_solve(A, b)

    assert x == pytest.approx([3.0, 0.0])


def test_all_zero_matrix_returns_rhs():
    x = gaussian_solve(np.zeros((3, 3)), [1.0, 2.0, 3.0])

    assert x == pytest.approx([1.0, 2.0, 3.0])


def test_inputs_not_modified():
    A = np.array([[4.0, 1.0], [2.0, 3.0]])
    b = np.array([1.0, 2.0])
    A_before, b_before = A.copy(), b.copy()

    gaussian_solve(A, b)

    assert np.array_equal(A, A_before)
    assert np.array_equal(b, b_before)


def test_shape_mismatch_raises():
    with pytest.raises(ValueError):
        gaussian_solve(np.ones((2, 3)), [1.0, 2.0])
    with pytest.raises(ValueError):
        gaussian_solve(np.eye(2), [1.0, 2.0, 3.0])
