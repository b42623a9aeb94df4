"""
Linear system solver from scratch.

Implements:
- Gauss-Jordan elimination with partial pivoting

Used by polynomial regression to solve the normal equations
(X^T X) c = X^T y without relying on np.linalg.
"""

import numpy as np

# Pivots smaller than this are treated as zero
PIVOT_TOLERANCE = 1e-12


def gaussian_solve(A, b, tol: float = PIVOT_TOLERANCE) -> np.ndarray:
    """
    Solve A x = b by Gauss-Jordan elimination with partial pivoting.

    Works on the augmented matrix M = [A | b]. For each row i the row with
    the largest |M[k, i]| (k >= i) is swapped into place, normalized, and
    column i is eliminated from every other row, so the last column holds
    the solution and no back-substitution is needed.

    A near-zero pivot does not raise: the row is left unreduced and the
    elimination continues. The matching solution component is then
    numerically meaningless.

    Args:
        A: Square coefficient matrix of shape (n, n)
        b: Right-hand side of shape (n,)
        tol: Pivot magnitude below which a row is skipped

    Returns:
        Solution vector of shape (n,)
    """
    A = np.array(A, dtype=np.float64)
    b = np.array(b, dtype=np.float64).ravel()

    if A.ndim != 2 or A.shape[0] != A.shape[1]:
        raise ValueError(f"A must be a square matrix, got shape {A.shape}")
    n = A.shape[0]
    if b.shape[0] != n:
        raise ValueError(f"b must have length {n}, got {b.shape[0]}")

    M = np.hstack([A, b.reshape(-1, 1)])

    for i in range(n):
        # Partial pivoting: first row with the largest magnitude wins
        max_row = i + int(np.argmax(np.abs(M[i:, i])))
        if max_row != i:
            M[[i, max_row]] = M[[max_row, i]]

        pivot = M[i, i]
        if abs(pivot) < tol:
            continue

        M[i, i:] /= pivot

        factors = M[:, i].copy()
        factors[i] = 0.0
        M[:, i:] -= np.outer(factors, M[i, i:])

    return M[:, n].copy()
