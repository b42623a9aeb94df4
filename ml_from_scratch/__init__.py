"""
ML From Scratch - small supervised learning algorithms built on NumPy only.

Regressors:
- PolynomialFitter: least-squares polynomial fit via the normal equations
- gaussian_solve: Gauss-Jordan elimination with partial pivoting

Classifiers (two features, binary labels):
- LogisticClassifier: batch gradient descent logistic regression
- KNeighborsClassifier: k-nearest neighbors with range-normalized distance
- DecisionTreeClassifier: shallow CART tree with Gini impurity

Every fit() returns a new immutable model; predict() never mutates it.
"""

# Data types
from .samples import FeatureRange, Label, Prediction, Sample

# Regressors
from .linear_solver import gaussian_solve
from .polynomial_regression import (PolynomialFitter, PolynomialModel,
                                    evaluate, fit_polynomial)

# Classifiers
from .logistic_regression import LogisticClassifier, LogisticModel, sigmoid
from .knn import KNeighborsClassifier, KNNModel
from .decision_tree import (DecisionTreeClassifier, Feature, Leaf, Split,
                            TreeNode, count_leaves, export_text, tree_depth)

__all__ = [
    # Data types
    'FeatureRange',
    'Label',
    'Prediction',
    'Sample',

    # Regressors
    'gaussian_solve',
    'PolynomialFitter',
    'PolynomialModel',
    'fit_polynomial',
    'evaluate',

    # Classifiers
    'LogisticClassifier',
    'LogisticModel',
    'sigmoid',
    'KNeighborsClassifier',
    'KNNModel',
    'DecisionTreeClassifier',
    'Feature',
    'Leaf',
    'Split',
    'TreeNode',
    'tree_depth',
    'count_leaves',
    'export_text',
]
