"""
Interactive Supervised Learning - Global Configuration

This module contains all configuration constants for the regression and
classification demos.
"""

from dataclasses import dataclass, field
from typing import Dict

from ml_from_scratch.samples import FeatureRange

# =============================================================================
# POLYNOMIAL REGRESSION
# =============================================================================
DEFAULT_POLYNOMIAL_DEGREE = 1
MAX_POLYNOMIAL_DEGREE = 5  # Degrees offered by the demo

# =============================================================================
# LOGISTIC REGRESSION
# =============================================================================
LEARNING_RATE = 0.1
GRADIENT_ITERATIONS = 200

# =============================================================================
# K-NEAREST NEIGHBORS
# =============================================================================
K_NEIGHBORS = 3

# =============================================================================
# DECISION TREE
# =============================================================================
TREE_MAX_DEPTH = 2  # Root is depth 0; depth 2 is always a leaf

# =============================================================================
# FEATURE DOMAINS
# =============================================================================
# House prices: size (sq ft) -> price (k$)
HOUSING_X_RANGE = FeatureRange(600.0, 3000.0)
HOUSING_Y_RANGE = FeatureRange(100.0, 600.0)

# Tomato ripeness: colour (0 = green, 1 = red) and size (cm)
TOMATO_X_RANGE = FeatureRange(0.0, 1.0)
TOMATO_Y_RANGE = FeatureRange(2.0, 10.0)

# =============================================================================
# DECISION BOUNDARY RENDERING
# =============================================================================
GRID_RESOLUTION = 100  # Grid points per axis when sampling predict()
PLOT_DPI = 150

# =============================================================================
# DATACLASSES FOR CONFIGURATION
# =============================================================================

@dataclass
class Preset:
    """Named pair of fixed feature domains."""
    name: str
    x_range: FeatureRange
    y_range: FeatureRange
    x_label: str = 'x'
    y_label: str = 'y'


PRESETS: Dict[str, Preset] = {
    'housing': Preset('housing', HOUSING_X_RANGE, HOUSING_Y_RANGE,
                      x_label='Size (sq ft)', y_label='Price ($k)'),
    'tomato': Preset('tomato', TOMATO_X_RANGE, TOMATO_Y_RANGE,
                     x_label='Color (green -> red)', y_label='Size (cm)'),
}


@dataclass
class RegressionConfig:
    """Polynomial regression configuration."""
    degree: int = DEFAULT_POLYNOMIAL_DEGREE
    preset: Preset = field(default_factory=lambda: PRESETS['housing'])


@dataclass
class LogisticConfig:
    """Logistic regression configuration."""
    learning_rate: float = LEARNING_RATE
    n_iterations: int = GRADIENT_ITERATIONS


@dataclass
class KNNConfig:
    """KNN configuration."""
    n_neighbors: int = K_NEIGHBORS


@dataclass
class TreeConfig:
    """Decision tree configuration."""
    max_depth: int = TREE_MAX_DEPTH


@dataclass
class ClassificationConfig:
    """Classification demo configuration."""
    preset: Preset = field(default_factory=lambda: PRESETS['tomato'])
    logistic: LogisticConfig = field(default_factory=LogisticConfig)
    knn: KNNConfig = field(default_factory=KNNConfig)
    tree: TreeConfig = field(default_factory=TreeConfig)


@dataclass
class PlotConfig:
    """Plot rendering configuration."""
    resolution: int = GRID_RESOLUTION
    dpi: int = PLOT_DPI


def get_default_config():
    """Get default configuration objects."""
    return {
        'regression': RegressionConfig(),
        'classification': ClassificationConfig(),
        'plot': PlotConfig(),
    }
