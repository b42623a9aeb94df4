"""
Evaluation module.

Provides metrics for the interactive models:
- Classification metrics: confusion matrix, accuracy, training report
- Regression metrics: MSE, RMSE, R2, training report

All metrics are implemented from scratch using only NumPy.
"""

from .metrics import (
    # Classification metrics
    confusion_matrix,
    accuracy_score,
    classification_report,
    print_confusion_matrix,
    ClassificationReport,

    # Regression metrics
    mean_squared_error,
    root_mean_squared_error,
    r2_score,
    regression_report,
    RegressionReport,
)

__all__ = [
    'confusion_matrix',
    'accuracy_score',
    'classification_report',
    'print_confusion_matrix',
    'ClassificationReport',
    'mean_squared_error',
    'root_mean_squared_error',
    'r2_score',
    'regression_report',
    'RegressionReport',
]
