"""
Decision Tree Classifier from scratch.

Implements:
- CART-style binary splits on two features
- Gini impurity for split selection
- Pre-pruning with max_depth (root is depth 0) and pure nodes

The tree is a nested, immutable structure of Leaf and Split nodes. It is
rebuilt from scratch on every fit and never modified afterwards.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple, Union

import numpy as np

from .samples import (NEGATIVE_PREDICTION, Prediction, Sample, label_for,
                      require_labels, to_arrays, to_targets)


class Feature(Enum):
    """Feature a split tests."""
    X = 'x'
    Y = 'y'


@dataclass(frozen=True)
class Leaf:
    """Terminal node holding the fraction of positive samples that reached it."""
    probability: float


@dataclass(frozen=True)
class Split:
    """Internal node: feature <= threshold goes left, > threshold goes right."""
    feature: Feature
    threshold: float
    left: 'TreeNode'
    right: 'TreeNode'


TreeNode = Union[Leaf, Split]


def gini(targets: np.ndarray) -> float:
    """
    Gini impurity of a binary target set.

    G = 1 - p^2 - (1 - p)^2, p = fraction of positives
    """
    if len(targets) == 0:
        return 0.0
    p = int(np.sum(targets)) / len(targets)
    return 1 - p * p - (1 - p) * (1 - p)


class DecisionTreeClassifier:
    """
    Shallow binary decision tree using Gini impurity.

    A split is scored by the size-weighted impurity of its children:
        impurity = gini(left) * |left| + gini(right) * |right|
    and the globally smallest score wins. Ties go to the first candidate
    seen, scanning feature x before y and thresholds in ascending order.
    """

    def __init__(self, max_depth: int = 2):
        """
        Initialize Decision Tree.

        Args:
            max_depth: Depth at which nodes are forced to be leaves
        """
        if max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {max_depth}")
        self.max_depth = max_depth

    @staticmethod
    def _create_leaf(targets: np.ndarray) -> Leaf:
        if len(targets) == 0:
            return Leaf(0.0)
        return Leaf(int(np.sum(targets)) / len(targets))

    @staticmethod
    def _find_best_split(columns: Tuple[np.ndarray, np.ndarray],
                         targets: np.ndarray) -> Optional[Tuple[Feature, float]]:
        """
        Find the feature and threshold with minimum weighted impurity.

        Candidate thresholds are midpoints between consecutive distinct
        values of each feature.

        Returns:
            Tuple of (feature, threshold), or None if no split leaves both
            sides non-empty
        """
        best_impurity = np.inf
        best = None

        for feature, values in zip(Feature, columns):
            unique_values = np.unique(values)
            thresholds = (unique_values[:-1] + unique_values[1:]) / 2

            for threshold in thresholds:
                left_mask = values <= threshold
                n_left = int(np.sum(left_mask))
                n_right = len(values) - n_left
                if n_left == 0 or n_right == 0:
                    continue

                impurity = (gini(targets[left_mask]) * n_left +
                            gini(targets[~left_mask]) * n_right)

                if impurity < best_impurity:
                    best_impurity = impurity
                    best = (feature, float(threshold))

        return best

    def _build_tree(self, columns: Tuple[np.ndarray, np.ndarray],
                    targets: np.ndarray, depth: int) -> TreeNode:
        """Recursively build the decision tree."""
        if depth >= self.max_depth or len(np.unique(targets)) <= 1:
            return self._create_leaf(targets)

        split = self._find_best_split(columns, targets)
        if split is None:
            return self._create_leaf(targets)

        feature, threshold = split
        feature_idx = 0 if feature is Feature.X else 1
        left_mask = columns[feature_idx] <= threshold
        right_mask = ~left_mask

        left = self._build_tree(tuple(c[left_mask] for c in columns),
                                targets[left_mask], depth + 1)
        right = self._build_tree(tuple(c[right_mask] for c in columns),
                                 targets[right_mask], depth + 1)

        return Split(feature, threshold, left, right)

    def fit(self, samples: Sequence[Sample]) -> TreeNode:
        """
        Build a decision tree from labeled samples.

        Returns:
            Root node; Leaf(0.0) for an empty sample set
        """
        require_labels(samples)
        columns = to_arrays(samples)
        targets = to_targets(samples)
        return self._build_tree(columns, targets, depth=0)

    @staticmethod
    def predict(node: Optional[TreeNode], x: float, y: float) -> Prediction:
        """
        Predict label and positive-class probability at (x, y).

        A missing tree predicts negative with probability 0.
        """
        if node is None:
            return NEGATIVE_PREDICTION

        while isinstance(node, Split):
            value = x if node.feature is Feature.X else y
            node = node.left if value <= node.threshold else node.right

        return Prediction(label_for(node.probability), node.probability)

    def score(self, node: Optional[TreeNode], samples: Sequence[Sample]) -> float:
        """Calculate accuracy on labeled samples."""
        if len(samples) == 0:
            return float('nan')
        hits = sum(self.predict(node, s.x, s.y).label is s.label for s in samples)
        return hits / len(samples)


def tree_depth(node: Optional[TreeNode]) -> int:
    """Get the actual depth of the tree (a single leaf has depth 0)."""
    if node is None or isinstance(node, Leaf):
        return 0
    return 1 + max(tree_depth(node.left), tree_depth(node.right))


def count_leaves(node: Optional[TreeNode]) -> int:
    """Get the number of leaf nodes."""
    if node is None:
        return 0
    if isinstance(node, Leaf):
        return 1
    return count_leaves(node.left) + count_leaves(node.right)


def export_text(node: Optional[TreeNode], precision: int = 2) -> str:
    """
    Render the tree as indented text, e.g.

        x <= 0.50
        |   leaf: p=0.00
        x > 0.50
        |   leaf: p=1.00
    """
    if node is None:
        return ''

    lines: List[str] = []

    def _walk(current: TreeNode, indent: int) -> None:
        pad = '|   ' * indent
        if isinstance(current, Leaf):
            lines.append(f"{pad}leaf: p={current.probability:.{precision}f}")
            return
        name = current.feature.value
        lines.append(f"{pad}{name} <= {current.threshold:.{precision}f}")
        _walk(current.left, indent + 1)
        lines.append(f"{pad}{name} > {current.threshold:.{precision}f}")
        _walk(current.right, indent + 1)

    _walk(node, 0)
    return '\n'.join(lines)
