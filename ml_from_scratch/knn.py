"""
K-Nearest Neighbors (KNN) Classifier from scratch.

Implements:
- Range-normalized squared Euclidean distance
- K-nearest neighbor voting with deterministic tie-breaking
- Positive-class probability as the fraction of positive neighbors

KNN is a non-parametric, instance-based learning algorithm: fitting only
takes a snapshot of the training samples.
"""

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

import numpy as np

from .samples import (NEGATIVE_PREDICTION, FeatureRange, Prediction, Sample,
                      label_for, require_labels, to_arrays, to_targets)

UNIT_RANGE = FeatureRange(0.0, 1.0)


@dataclass(frozen=True)
class KNNModel:
    """Snapshot of the labeled training samples plus distance settings."""
    samples: Tuple[Sample, ...]
    n_neighbors: int = 3
    x_range: FeatureRange = UNIT_RANGE
    y_range: FeatureRange = UNIT_RANGE

    def __len__(self) -> int:
        return len(self.samples)


class KNeighborsClassifier:
    """
    K-Nearest Neighbors Classifier over two features.

    Each axis is divided by the span of its fixed domain before the
    distance is taken, so features with different units weigh equally:

        d = ((px - x) / range_x)^2 + ((py - y) / range_y)^2
    """

    def __init__(self,
                 n_neighbors: int = 3,
                 x_range: FeatureRange = UNIT_RANGE,
                 y_range: FeatureRange = UNIT_RANGE):
        """
        Initialize KNN Classifier.

        Args:
            n_neighbors: Number of neighbors to use (k)
            x_range: Fixed domain of the first feature
            y_range: Fixed domain of the second feature
        """
        if n_neighbors < 1:
            raise ValueError(f"n_neighbors must be >= 1, got {n_neighbors}")
        x_range, y_range = FeatureRange(*x_range), FeatureRange(*y_range)
        if x_range.span == 0 or y_range.span == 0:
            raise ValueError("Feature ranges must have a non-zero span")

        self.n_neighbors = n_neighbors
        self.x_range = x_range
        self.y_range = y_range

    def fit(self, samples: Sequence[Sample]) -> KNNModel:
        """
        Store training data (lazy learning).

        Returns:
            KNNModel holding a snapshot of the samples
        """
        require_labels(samples)
        return KNNModel(tuple(samples), self.n_neighbors, self.x_range, self.y_range)

    @staticmethod
    def _distances(model: KNNModel, x: float, y: float) -> np.ndarray:
        """Squared normalized distances from (x, y) to every training sample."""
        px, py = to_arrays(model.samples)
        dx = (px - x) / model.x_range.span
        dy = (py - y) / model.y_range.span
        return dx * dx + dy * dy

    @classmethod
    def kneighbors(cls, model: KNNModel, x: float,
                   y: float) -> Tuple[np.ndarray, np.ndarray]:
        """
        Find the k nearest training samples to (x, y).

        Equal distances keep the training order (stable sort).

        Returns:
            Tuple of (indices, squared_distances), nearest first
        """
        if len(model) == 0:
            return np.array([], dtype=np.int64), np.array([], dtype=np.float64)

        distances = cls._distances(model, x, y)
        k = min(model.n_neighbors, len(distances))
        indices = np.argsort(distances, kind='stable')[:k]
        return indices, distances[indices]

    @classmethod
    def predict(cls, model: Optional[KNNModel], x: float, y: float) -> Prediction:
        """
        Predict label and positive-class probability at (x, y).

        An empty or missing model predicts negative with probability 0.
        """
        if model is None or len(model) == 0:
            return NEGATIVE_PREDICTION

        indices, _ = cls.kneighbors(model, x, y)
        targets = to_targets(model.samples)
        probability = float(np.sum(targets[indices])) / len(indices)
        return Prediction(label_for(probability), probability)

    def score(self, model: Optional[KNNModel], samples: Sequence[Sample]) -> float:
        """Calculate accuracy on labeled samples."""
        if len(samples) == 0:
            return float('nan')
        hits = sum(self.predict(model, s.x, s.y).label is s.label for s in samples)
        return hits / len(samples)
