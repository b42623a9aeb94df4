"""
Decision boundary and curve visualization.

decision_grid() densely samples a predict(x, y) function over the fixed
feature domains; the plot helpers draw the result with matplotlib.
"""

from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Tuple

import numpy as np

from ml_from_scratch.polynomial_regression import PolynomialModel
from ml_from_scratch.samples import FeatureRange, Label, Prediction, Sample

PredictFn = Callable[[float, float], Prediction]


@dataclass
class DecisionGrid:
    """Predictions sampled on a regular grid (rows follow y, columns follow x)."""
    xx: np.ndarray
    yy: np.ndarray
    positive: np.ndarray
    probability: np.ndarray

    @property
    def shape(self) -> Tuple[int, int]:
        return self.xx.shape


def decision_grid(predict: PredictFn,
                  x_range: FeatureRange,
                  y_range: FeatureRange,
                  resolution: int = 100) -> DecisionGrid:
    """
    Evaluate predict(x, y) at the centre of each cell of a grid.

    Args:
        predict: Bound predict function returning a Prediction
        x_range: Domain of the first feature
        y_range: Domain of the second feature
        resolution: Number of cells per axis

    Returns:
        DecisionGrid with arrays of shape (resolution, resolution)
    """
    if resolution < 1:
        raise ValueError(f"resolution must be >= 1, got {resolution}")

    x_step = (x_range.maximum - x_range.minimum) / resolution
    y_step = (y_range.maximum - y_range.minimum) / resolution
    xs = x_range.minimum + (np.arange(resolution) + 0.5) * x_step
    ys = y_range.minimum + (np.arange(resolution) + 0.5) * y_step
    xx, yy = np.meshgrid(xs, ys)

    positive = np.zeros(xx.shape, dtype=bool)
    probability = np.zeros(xx.shape, dtype=np.float64)

    for idx in np.ndindex(xx.shape):
        pred = predict(float(xx[idx]), float(yy[idx]))
        positive[idx] = pred.label is Label.POSITIVE
        probability[idx] = pred.probability

    return DecisionGrid(xx, yy, positive, probability)


def plot_decision_boundary(predict: PredictFn,
                           samples: Sequence[Sample],
                           x_range: FeatureRange,
                           y_range: FeatureRange,
                           title: str = "Decision Boundary",
                           x_label: str = 'x',
                           y_label: str = 'y',
                           resolution: int = 100,
                           query: Optional[Tuple[float, float]] = None,
                           save_path: Optional[str] = None,
                           figsize: Tuple[int, int] = (8, 6),
                           dpi: int = 150):
    """
    Plot classifier regions with the labeled samples on top.

    Positive regions are shaded red, negative regions green.

    Returns:
        matplotlib.figure.Figure
    """
    import matplotlib.pyplot as plt
    from matplotlib.colors import ListedColormap

    grid = decision_grid(predict, x_range, y_range, resolution)

    fig, ax = plt.subplots(figsize=figsize)
    ax.imshow(grid.positive.astype(float), origin='lower', aspect='auto',
              extent=(x_range.minimum, x_range.maximum, y_range.minimum, y_range.maximum),
              cmap=ListedColormap(['#c8f0c8', '#f5c6c6']), vmin=0.0, vmax=1.0, alpha=0.6)

    pos = [s for s in samples if s.label is Label.POSITIVE]
    neg = [s for s in samples if s.label is not Label.POSITIVE]
    if pos:
        ax.scatter([s.x for s in pos], [s.y for s in pos], c='red',
                   edgecolors='k', label='positive')
    if neg:
        ax.scatter([s.x for s in neg], [s.y for s in neg], c='green',
                   edgecolors='k', label='negative')

    if query is not None:
        pred = predict(*query)
        ax.scatter([query[0]], [query[1]], marker='*', s=250,
                   c='red' if pred.label is Label.POSITIVE else 'green',
                   edgecolors='k', label=f'query (p={pred.probability:.2f})')

    ax.set_xlim(x_range.minimum, x_range.maximum)
    ax.set_ylim(y_range.minimum, y_range.maximum)
    ax.set_xlabel(x_label)
    ax.set_ylabel(y_label)
    ax.set_title(title)
    if samples or query is not None:
        ax.legend(loc='best')

    fig.tight_layout()
    if save_path:
        plt.savefig(save_path, dpi=dpi, bbox_inches='tight')
        print(f"Saved to {save_path}")

    return fig


def plot_polynomial_fit(model: PolynomialModel,
                        samples: Sequence[Sample],
                        x_range: FeatureRange,
                        y_range: FeatureRange,
                        title: Optional[str] = None,
                        x_label: str = 'x',
                        y_label: str = 'y',
                        query: Optional[float] = None,
                        save_path: Optional[str] = None,
                        figsize: Tuple[int, int] = (8, 6),
                        dpi: int = 150):
    """
    Plot the samples and the fitted curve over the x domain.

    An unfit model draws the samples only.

    Returns:
        matplotlib.figure.Figure
    """
    import matplotlib.pyplot as plt

    fig, ax = plt.subplots(figsize=figsize)
    ax.scatter([s.x for s in samples], [s.y for s in samples], c='tab:blue',
               edgecolors='k', label='samples')

    if model.is_fitted:
        xs = np.linspace(x_range.minimum, x_range.maximum, 400)
        ax.plot(xs, model.predict(xs), c='tab:red', label=model.format_equation())
        if query is not None:
            ax.scatter([query], [model.evaluate(query)], marker='*', s=250,
                       c='tab:orange', edgecolors='k', label='prediction')

    ax.set_xlim(x_range.minimum, x_range.maximum)
    ax.set_ylim(y_range.minimum, y_range.maximum)
    ax.set_xlabel(x_label)
    ax.set_ylabel(y_label)
    ax.set_title(title or f"Polynomial fit (degree {model.degree})")
    ax.legend(loc='best')

    fig.tight_layout()
    if save_path:
        plt.savefig(save_path, dpi=dpi, bbox_inches='tight')
        print(f"Saved to {save_path}")

    return fig
