"""
Logistic regression tests.
"""

import math
import os
import sys

import pytest

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from ml_from_scratch import Label, LogisticClassifier, LogisticModel, Sample, sigmoid

P, N = Label.POSITIVE, Label.NEGATIVE


def _separable_samples():
    """Green tomatoes (x <= 0.2) are negative, red ones (x >= 0.8) positive."""
    ys = [0.2, 0.5, 0.8]
    neg = [Sample(x, y, N) for x, y in zip([0.0, 0.1, 0.2], ys)]
    pos = [Sample(x, y, P) for x, y in zip([0.8, 0.9, 1.0], ys)]
    return neg + pos


def test_separable_data():
    """Every training point is classified correctly after training."""
    print("=" * 60)
    print("TEST: Logistic Separability")
    print("=" * 60)

    samples = _separable_samples()
    clf = LogisticClassifier()

    model = clf.fit(samples)

    assert model is not None
    assert model.w1 > 0
    for s in samples:
        pred = clf.predict(model, s.x, s.y)
        assert pred.label is s.label, (s, pred)
        assert 0.0 < pred.probability < 1.0
    assert clf.score(model, samples) == 1.0
    print(f"  {model.format_equation()}")


def test_empty_dataset_has_no_model():
    clf = LogisticClassifier()

    model = clf.fit([])

    assert model is None
    pred = clf.predict(model, 0.5, 5.0)
    assert pred.label is N
    assert pred.probability == 0.0


def test_zero_iterations_keeps_zero_weights():
    model = LogisticClassifier(n_iterations=0).fit(_separable_samples())

    assert model == LogisticModel(0.0, 0.0, 0.0)


def test_first_step_matches_gradient():
    """One pass from zero weights: w -= lr * mean((0.5 - t) * feature)."""
    samples = [Sample(1.0, 2.0, P), Sample(3.0, 4.0, N)]

    model = LogisticClassifier(learning_rate=0.1, n_iterations=1).fit(samples)

    # err = [-0.5, 0.5]
    assert model.w0 == pytest.approx(-0.1 * 0.0 / 2)
    assert model.w1 == pytest.approx(-0.1 * (-0.5 * 1.0 + 0.5 * 3.0) / 2)
    assert model.w2 == pytest.approx(-0.1 * (-0.5 * 2.0 + 0.5 * 4.0) / 2)


def test_probability_half_is_positive():
    pred = LogisticClassifier.predict(LogisticModel(0.0, 0.0, 0.0), 1.0, 1.0)

    assert pred.probability == 0.5
    assert pred.label is P


def test_extreme_scores_do_not_overflow():
    model = LogisticModel(0.0, 1000.0, 0.0)

    assert LogisticClassifier.predict(model, -10.0, 0.0) == (N, 0.0)
    assert LogisticClassifier.predict(model, 10.0, 0.0) == (P, 1.0)


def test_nan_input_propagates():
    pred = LogisticClassifier.predict(LogisticModel(0.1, 0.2, 0.3), float('nan'), 1.0)

    assert math.isnan(pred.probability)
    assert pred.label is N


def test_sigmoid_values():
    assert sigmoid(0.0) == 0.5
    assert sigmoid(2.0) + sigmoid(-2.0) == pytest.approx(1.0)


def test_fit_is_idempotent():
    samples = _separable_samples()
    clf = LogisticClassifier()

    assert clf.fit(samples) == clf.fit(list(samples))


def test_unlabeled_sample_rejected():
    with pytest.raises(ValueError):
        LogisticClassifier().fit([Sample(0.1, 2.0)])


def test_format_equation():
    text = LogisticModel(1.0, -2.5, 0.25).format_equation()

    assert text == 'p = 1/(1 + exp(-(1.00 + -2.50*x + 0.25*y)))'
