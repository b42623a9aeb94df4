"""
Sample and prediction types shared by all models.

A dataset is an ordered sequence of Sample objects. For regression the
`y` field is the continuous target and `label` is None; for classification
both `x` and `y` are features and `label` is required.
"""

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Optional, Sequence, Tuple

import numpy as np


class Label(Enum):
    """Binary class label."""
    POSITIVE = 'positive'
    NEGATIVE = 'negative'

    @classmethod
    def parse(cls, text: str) -> 'Label':
        """
        Parse a label from user input.

        Accepts 'positive'/'negative', 'ripe'/'unripe', 'yes'/'no'
        and '1'/'0' (case-insensitive).
        """
        key = str(text).strip().lower()
        if key in _POSITIVE_NAMES:
            return cls.POSITIVE
        if key in _NEGATIVE_NAMES:
            return cls.NEGATIVE
        raise ValueError(f"Unknown label: {text!r}")


_POSITIVE_NAMES = {'positive', 'pos', 'ripe', 'yes', 'true', '1', '+'}
_NEGATIVE_NAMES = {'negative', 'neg', 'unripe', 'no', 'false', '0', '-'}


@dataclass(frozen=True)
class Sample:
    """Single data point."""
    x: float
    y: float
    label: Optional[Label] = None

    @property
    def is_positive(self) -> bool:
        return self.label is Label.POSITIVE


class Prediction(NamedTuple):
    """Classifier output: predicted label and probability of the positive class."""
    label: Label
    probability: float


NEGATIVE_PREDICTION = Prediction(Label.NEGATIVE, 0.0)


def label_for(probability: float) -> Label:
    """Positive iff probability >= 0.5 (ties resolve to positive)."""
    return Label.POSITIVE if probability >= 0.5 else Label.NEGATIVE


def require_labels(samples: Sequence[Sample]) -> None:
    """Raise ValueError if any sample lacks a class label."""
    for i, sample in enumerate(samples):
        if sample.label is None:
            raise ValueError(f"Sample {i} has no label; classifiers need labeled samples")


def to_arrays(samples: Sequence[Sample]) -> Tuple[np.ndarray, np.ndarray]:
    """
    Split samples into coordinate arrays.

    Returns:
        Tuple of (x, y) float64 arrays of shape (n_samples,)
    """
    x = np.array([s.x for s in samples], dtype=np.float64)
    y = np.array([s.y for s in samples], dtype=np.float64)
    return x, y


def to_targets(samples: Sequence[Sample]) -> np.ndarray:
    """Binary targets: 1.0 for positive samples, 0.0 otherwise."""
    return np.array([1.0 if s.is_positive else 0.0 for s in samples], dtype=np.float64)


class FeatureRange(NamedTuple):
    """Fixed domain of one feature axis."""
    minimum: float
    maximum: float

    @property
    def span(self) -> float:
        return self.maximum - self.minimum
