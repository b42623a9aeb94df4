"""
Evaluation Metrics - Implemented FROM SCRATCH.

Metrics for the interactive regression and classification models.

Classification Metrics:
- Confusion Matrix (binary, negative/positive)
- Accuracy
- Training-set report for a fitted classifier

Regression Metrics:
- MSE, RMSE
- R-squared (R2)
- Training-set report for a fitted polynomial
"""

import math
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

import numpy as np

from ml_from_scratch.samples import Label, Prediction, Sample, to_arrays

# Row/column order of binary confusion matrices
CLASS_ORDER = (Label.NEGATIVE, Label.POSITIVE)


# =============================================================================
# CLASSIFICATION METRICS
# =============================================================================

def confusion_matrix(y_true: Sequence[Label], y_pred: Sequence[Label]) -> np.ndarray:
    """
    Compute the binary confusion matrix.

    Parameters
    ----------
    y_true : sequence of Label
        Ground truth labels.
    y_pred : sequence of Label
        Predicted labels.

    Returns
    -------
    np.ndarray
        2x2 integer matrix. Row i, column j counts samples whose true
        label is CLASS_ORDER[i] and predicted label is CLASS_ORDER[j].

    Example
    -------
    >>> P, N = Label.POSITIVE, Label.NEGATIVE
    >>> confusion_matrix([N, N, P, P], [N, P, P, P])
    array([[1, 1],
           [0, 2]])
    """
    if len(y_true) != len(y_pred):
        raise ValueError("y_true and y_pred must have the same length")

    cm = np.zeros((2, 2), dtype=np.int64)
    for true_label, pred_label in zip(y_true, y_pred):
        cm[CLASS_ORDER.index(true_label), CLASS_ORDER.index(pred_label)] += 1
    return cm


def accuracy_score(y_true: Sequence[Label], y_pred: Sequence[Label]) -> float:
    """
    Calculate classification accuracy.

    Accuracy = correct_predictions / total_predictions

    Returns 0.0 for empty input.
    """
    if len(y_true) == 0:
        return 0.0
    correct = sum(t is p for t, p in zip(y_true, y_pred))
    return correct / len(y_true)


@dataclass
class ClassificationReport:
    """Training-set evaluation of a fitted classifier."""
    accuracy: float
    confusion: np.ndarray
    n_samples: int
    n_positive: int


def classification_report(predict: Callable[[float, float], Prediction],
                          samples: Sequence[Sample]) -> ClassificationReport:
    """
    Evaluate a bound predict(x, y) function against labeled samples.

    Parameters
    ----------
    predict : callable
        Function of (x, y) returning a Prediction.
    samples : sequence of Sample
        Labeled samples.
    """
    y_true = [s.label for s in samples]
    y_pred = [predict(s.x, s.y).label for s in samples]
    return ClassificationReport(
        accuracy=accuracy_score(y_true, y_pred),
        confusion=confusion_matrix(y_true, y_pred),
        n_samples=len(samples),
        n_positive=sum(1 for label in y_true if label is Label.POSITIVE),
    )


def print_confusion_matrix(cm: np.ndarray,
                           class_names: Optional[List[str]] = None,
                           title: str = "Confusion Matrix") -> str:
    """
    Create ASCII representation of a binary confusion matrix.

    Parameters
    ----------
    cm : np.ndarray
        Confusion matrix from confusion_matrix().
    class_names : list, optional
        Names for the negative and positive class.
    title : str
        Title for the matrix.

    Returns
    -------
    str
        Formatted string representation.
    """
    if class_names is None:
        class_names = [label.value for label in CLASS_ORDER]

    val_width = max(len(str(int(np.max(cm)))), 4, *(len(n) for n in class_names))
    label_width = max(len(name) for name in class_names)

    header = " " * (label_width + 8) + " ".join(f"{name:>{val_width}}" for name in class_names)
    lines = [title, "=" * len(header), " " * (label_width + 8) + "Predicted", header,
             "-" * len(header)]

    for i, row_name in enumerate(class_names):
        prefix = "Actual " if i == 0 else "       "
        row_vals = " ".join(f"{int(cm[i, j]):>{val_width}}" for j in range(len(class_names)))
        lines.append(f"{prefix}{row_name:>{label_width}} {row_vals}")

    lines.append("=" * len(header))

    correct = np.trace(cm)
    total = np.sum(cm)
    accuracy = correct / total if total > 0 else 0
    lines.append(f"Accuracy: {accuracy:.4f} ({int(correct)}/{int(total)})")

    return "\n".join(lines)


# =============================================================================
# REGRESSION METRICS
# =============================================================================

def mean_squared_error(y_true, y_pred) -> float:
    """
    Calculate Mean Squared Error (MSE).

    MSE = (1/n) * sum((y_true - y_pred)^2)
    """
    y_true = np.asarray(y_true, dtype=np.float64)
    y_pred = np.asarray(y_pred, dtype=np.float64)
    if y_true.size == 0:
        return math.nan
    return float(np.mean((y_true - y_pred) ** 2))


def root_mean_squared_error(y_true, y_pred) -> float:
    """Calculate Root Mean Squared Error (RMSE)."""
    return math.sqrt(mean_squared_error(y_true, y_pred))


def r2_score(y_true, y_pred) -> float:
    """
    Calculate R-squared (coefficient of determination).

    Parameters
    ----------
    y_true : array-like
        Ground truth values.
    y_pred : array-like
        Predicted values.

    Returns
    -------
    float
        R2 score. Best possible score is 1.0, can be negative.

    Mathematical Definition
    -----------------------
    R2 = 1 - (SS_res / SS_tot)
       = 1 - (sum((y_true - y_pred)^2) / sum((y_true - mean(y_true))^2))

    Interpretation
    --------------
    R2 = 1.0: Perfect predictions
    R2 = 0.0: Model predicts the mean (as good as baseline)
    R2 < 0:   Model is worse than predicting the mean
    """
    y_true = np.asarray(y_true, dtype=np.float64)
    y_pred = np.asarray(y_pred, dtype=np.float64)
    if y_true.size == 0:
        return math.nan

    ss_res = np.sum((y_true - y_pred) ** 2)
    ss_tot = np.sum((y_true - np.mean(y_true)) ** 2)

    # Constant targets
    if ss_tot == 0:
        return 1.0 if np.allclose(y_true, y_pred) else 0.0

    return float(1 - ss_res / ss_tot)


@dataclass
class RegressionReport:
    """Training-set evaluation of a fitted polynomial."""
    mse: float
    rmse: float
    r2: float
    n_samples: int


def regression_report(evaluate: Callable[[np.ndarray], np.ndarray],
                      samples: Sequence[Sample]) -> RegressionReport:
    """
    Evaluate a vectorised model function against (x, y) samples.

    Parameters
    ----------
    evaluate : callable
        Function mapping an array of x values to predicted y values,
        e.g. PolynomialModel.predict.
    samples : sequence of Sample
        Regression samples.
    """
    x, y = to_arrays(samples)
    y_pred = evaluate(x)
    mse = mean_squared_error(y, y_pred)
    return RegressionReport(
        mse=mse,
        rmse=math.sqrt(mse) if not math.isnan(mse) else math.nan,
        r2=r2_score(y, y_pred),
        n_samples=len(samples),
    )
