"""
Polynomial Regression from scratch using the Normal Equation.

Fits f(x) = c0 + c1*x + c2*x^2 + ... + cd*x^d to (x, y) samples by
ordinary least squares. The normal equations

    A c = b,   A[i][j] = sum(x^(i+j)),   b[i] = sum(x^i * y)

are built directly from the power sequences of each sample and solved
with the Gauss-Jordan solver in linear_solver.py.
"""

import math
from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np

from .linear_solver import gaussian_solve
from .samples import Sample, to_arrays


@dataclass(frozen=True)
class PolynomialModel:
    """
    Fitted polynomial coefficients c[0..degree].

    An empty coefficient tuple means the model is unfit (too few samples
    for the requested degree); evaluating it yields NaN.
    """
    coefficients: Tuple[float, ...] = ()

    @property
    def is_fitted(self) -> bool:
        return len(self.coefficients) > 0

    @property
    def degree(self) -> int:
        """Polynomial degree, -1 for an unfit model."""
        return len(self.coefficients) - 1

    def evaluate(self, x: float) -> float:
        """
        Evaluate the polynomial at x.

        Returns:
            f(x), or math.nan if the model is unfit
        """
        if not self.coefficients:
            return math.nan

        result = 0.0
        power = 1.0
        for c in self.coefficients:
            result += c * power
            power *= x
        return result

    def predict(self, X) -> np.ndarray:
        """Evaluate at every value of X (any shape)."""
        X = np.asarray(X, dtype=np.float64)
        if not self.coefficients:
            return np.full(X.shape, np.nan)

        result = np.zeros(X.shape, dtype=np.float64)
        power = np.ones(X.shape, dtype=np.float64)
        for c in self.coefficients:
            result += c * power
            power *= X
        return result

    def format_equation(self, precision: int = 2) -> str:
        """
        Human readable equation, e.g. '3.00 + 2.00x - 0.50x^2'.

        Returns an empty string for an unfit model.
        """
        parts = []
        for i, c in enumerate(self.coefficients):
            if i == 0:
                parts.append(f"{c:.{precision}f}")
                continue
            sign = ' + ' if c >= 0 else ' - '
            term = 'x' if i == 1 else f'x^{i}'
            parts.append(f"{sign}{abs(c):.{precision}f}{term}")
        return ''.join(parts)


UNFIT_MODEL = PolynomialModel()


def normal_equations(x: np.ndarray, y: np.ndarray,
                     degree: int) -> Tuple[np.ndarray, np.ndarray]:
    """
    Build the normal-equations system for a polynomial of given degree.

    Args:
        x: Input values (n_samples,)
        y: Targets (n_samples,)
        degree: Polynomial degree

    Returns:
        Tuple of (A, b) with shapes (degree+1, degree+1) and (degree+1,)
    """
    n = degree + 1
    A = np.zeros((n, n), dtype=np.float64)
    b = np.zeros(n, dtype=np.float64)

    for xi, yi in zip(x, y):
        # [1, x, x^2, ..., x^degree]
        powers = np.empty(n, dtype=np.float64)
        powers[0] = 1.0
        for i in range(1, n):
            powers[i] = powers[i - 1] * xi

        b += powers * yi
        A += np.outer(powers, powers)

    return A, b


class PolynomialFitter:
    """
    Least-squares polynomial regression of a single input.

    Each call to fit() returns a new, independent PolynomialModel; the
    fitter itself holds only the configured degree.
    """

    def __init__(self, degree: int = 1):
        """
        Initialize the fitter.

        Args:
            degree: Polynomial degree (0 = constant, 1 = line, ...)
        """
        if isinstance(degree, bool) or int(degree) != degree or degree < 0:
            raise ValueError(f"degree must be a non-negative integer, got {degree!r}")
        self.degree = int(degree)

    def fit(self, samples: Sequence[Sample]) -> PolynomialModel:
        """
        Fit the polynomial to (x, y) samples.

        Returns:
            Fitted model, or the unfit model if len(samples) < degree + 1
        """
        if len(samples) < self.degree + 1:
            return UNFIT_MODEL

        x, y = to_arrays(samples)
        A, b = normal_equations(x, y, self.degree)
        coefficients = gaussian_solve(A, b)

        return PolynomialModel(tuple(float(c) for c in coefficients))

    @staticmethod
    def score(model: PolynomialModel, samples: Sequence[Sample]) -> float:
        """
        Calculate R² (coefficient of determination) on samples.

        R² = 1 - (SS_res / SS_tot). Returns NaN for an unfit model and
        0.0 when the targets have no variance.
        """
        if not model.is_fitted or len(samples) == 0:
            return math.nan

        x, y = to_arrays(samples)
        y_pred = model.predict(x)

        ss_res = np.sum((y - y_pred) ** 2)
        ss_tot = np.sum((y - np.mean(y)) ** 2)

        if ss_tot == 0:
            return 0.0
        return float(1 - ss_res / ss_tot)


def fit_polynomial(samples: Sequence[Sample], degree: int) -> PolynomialModel:
    """Fit a polynomial of the given degree to samples."""
    return PolynomialFitter(degree).fit(samples)


def evaluate(model: PolynomialModel, x: float) -> float:
    """Evaluate a fitted polynomial at x (NaN if unfit)."""
    return model.evaluate(x)
