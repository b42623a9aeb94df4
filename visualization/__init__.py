"""
Visualization helpers: decision-grid sampling and matplotlib plots.
"""

from .boundary import (DecisionGrid, decision_grid, plot_decision_boundary,
                       plot_polynomial_fit)

__all__ = [
    'DecisionGrid',
    'decision_grid',
    'plot_decision_boundary',
    'plot_polynomial_fit',
]
