"""
Logistic Regression from scratch.

Implements:
- Sigmoid activation
- Full-batch gradient descent on the log-loss
- Two-feature decision function p(x, y) = sigmoid(w0 + w1*x + w2*y)

Training is deterministic: weights start at zero and the number of
iterations is fixed, so the same samples always give the same weights.
"""

import math
from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np

from .samples import (NEGATIVE_PREDICTION, Prediction, Sample, label_for,
                      require_labels, to_arrays, to_targets)


def sigmoid(z):
    """Logistic function 1 / (1 + e^-z)."""
    return 1.0 / (1.0 + np.exp(-z))


def _sigmoid_scalar(z: float) -> float:
    # math.exp overflows where np.exp would return inf
    try:
        return 1.0 / (1.0 + math.exp(-z))
    except OverflowError:
        return 0.0


@dataclass(frozen=True)
class LogisticModel:
    """Weights of p(x, y) = sigmoid(w0 + w1*x + w2*y)."""
    w0: float
    w1: float
    w2: float

    def probability(self, x: float, y: float) -> float:
        """Probability of the positive class at (x, y)."""
        return _sigmoid_scalar(self.w0 + self.w1 * x + self.w2 * y)

    def format_equation(self, precision: int = 2) -> str:
        return (f"p = 1/(1 + exp(-({self.w0:.{precision}f} + "
                f"{self.w1:.{precision}f}*x + {self.w2:.{precision}f}*y)))")


class LogisticClassifier:
    """
    Binary logistic regression over two features.

    Gradient of the mean log-loss for one full pass:
        g0 = sum(p - t),  g1 = sum((p - t) * x),  g2 = sum((p - t) * y)
    followed by the simultaneous update w -= lr * g / n.
    """

    def __init__(self, learning_rate: float = 0.1, n_iterations: int = 200):
        """
        Initialize Logistic Regression.

        Args:
            learning_rate: Gradient descent step size
            n_iterations: Number of full-batch passes
        """
        if learning_rate <= 0:
            raise ValueError(f"learning_rate must be positive, got {learning_rate}")
        if n_iterations < 0:
            raise ValueError(f"n_iterations must be >= 0, got {n_iterations}")
        self.learning_rate = learning_rate
        self.n_iterations = n_iterations

    def fit(self, samples: Sequence[Sample]) -> Optional[LogisticModel]:
        """
        Train on labeled samples.

        Returns:
            LogisticModel, or None if samples is empty
        """
        if len(samples) == 0:
            return None
        require_labels(samples)

        x, y = to_arrays(samples)
        t = to_targets(samples)
        n = len(t)

        w0 = w1 = w2 = 0.0
        with np.errstate(over='ignore'):
            for _ in range(self.n_iterations):
                err = sigmoid(w0 + w1 * x + w2 * y) - t

                g0 = np.sum(err)
                g1 = np.sum(err * x)
                g2 = np.sum(err * y)

                w0 -= self.learning_rate * g0 / n
                w1 -= self.learning_rate * g1 / n
                w2 -= self.learning_rate * g2 / n

        return LogisticModel(float(w0), float(w1), float(w2))

    @staticmethod
    def predict(model: Optional[LogisticModel], x: float, y: float) -> Prediction:
        """
        Predict label and positive-class probability at (x, y).

        A missing model (empty training set) predicts negative with
        probability 0.
        """
        if model is None:
            return NEGATIVE_PREDICTION
        p = model.probability(x, y)
        return Prediction(label_for(p), p)

    def score(self, model: Optional[LogisticModel], samples: Sequence[Sample]) -> float:
        """Calculate accuracy on labeled samples."""
        if len(samples) == 0:
            return math.nan
        hits = sum(self.predict(model, s.x, s.y).label is s.label for s in samples)
        return hits / len(samples)
