"""
K-nearest neighbors tests.
"""

import os
import sys

import pytest

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from ml_from_scratch import FeatureRange, KNeighborsClassifier, KNNModel, Label, Sample

P, N = Label.POSITIVE, Label.NEGATIVE
TOMATO_X = FeatureRange(0.0, 1.0)
TOMATO_Y = FeatureRange(2.0, 10.0)


def _clf(k=3):
    return KNeighborsClassifier(n_neighbors=k, x_range=TOMATO_X, y_range=TOMATO_Y)


def test_majority_with_coincident_points():
    """Equal distances keep dataset order: first three are P, P, N."""
    print("=" * 60)
    print("TEST: KNN Majority Vote")
    print("=" * 60)

    labels = [P, P, N, P, N]
    samples = [Sample(0.5, 5.0, label) for label in labels]
    clf = _clf()

    pred = clf.predict(clf.fit(samples), 0.5, 5.0)

    assert pred.probability == pytest.approx(2 / 3)
    assert pred.label is P
    print(f"  Prediction: {pred.label.value} (p={pred.probability:.3f})")


def test_tie_order_decides_minority():
    samples = [Sample(0.5, 5.0, label) for label in [N, N, P, P, P]]
    clf = _clf()

    pred = clf.predict(clf.fit(samples), 0.5, 5.0)

    assert pred.probability == pytest.approx(1 / 3)
    assert pred.label is N


def test_k_capped_by_dataset_size():
    """Two samples with k=3: one vote each, 0.5 resolves to positive."""
    samples = [Sample(0.1, 3.0, P), Sample(0.9, 9.0, N)]
    clf = _clf()

    pred = clf.predict(clf.fit(samples), 0.5, 5.0)

    assert pred.probability == 0.5
    assert pred.label is P


def test_distance_is_range_normalized():
    """A is 1 cm away in size (1/8 of the range), B is 0.2 away in colour."""
    samples = [Sample(0.5, 7.0, P), Sample(0.7, 6.0, N)]
    clf = _clf(k=1)
    model = clf.fit(samples)

    indices, distances = clf.kneighbors(model, 0.5, 6.0)

    assert list(indices) == [0]
    assert distances[0] == pytest.approx(0.125 ** 2)
    assert clf.predict(model, 0.5, 6.0).label is P


def test_kneighbors_sorted_nearest_first():
    samples = [Sample(0.95, 6.0, P), Sample(0.1, 6.0, N), Sample(0.45, 6.0, N)]
    clf = _clf(k=3)

    indices, distances = clf.kneighbors(clf.fit(samples), 0.5, 6.0)

    assert list(indices) == [2, 1, 0]
    assert list(distances) == sorted(distances)


def test_empty_dataset_predicts_negative():
    clf = _clf()

    model = clf.fit([])

    assert len(model) == 0
    assert clf.predict(model, 0.5, 5.0) == (N, 0.0)
    assert clf.predict(None, 0.5, 5.0) == (N, 0.0)


def test_fit_takes_snapshot():
    samples = [Sample(0.2, 4.0, N)]
    clf = _clf()

    model = clf.fit(samples)
    samples.append(Sample(0.2, 4.0, P))

    assert len(model) == 1
    assert clf.predict(model, 0.2, 4.0).label is N


def test_fit_is_idempotent():
    samples = [Sample(0.2, 4.0, N), Sample(0.8, 7.0, P)]
    clf = _clf()

    assert clf.fit(samples) == clf.fit(list(samples))
    assert isinstance(clf.fit(samples), KNNModel)


def test_nan_query_does_not_crash():
    samples = [Sample(0.2, 4.0, N), Sample(0.8, 7.0, P)]
    clf = _clf()

    pred = clf.predict(clf.fit(samples), float('nan'), 5.0)

    assert 0.0 <= pred.probability <= 1.0


def test_invalid_parameters_raise():
    with pytest.raises(ValueError):
        KNeighborsClassifier(n_neighbors=0)
    with pytest.raises(ValueError):
        KNeighborsClassifier(x_range=FeatureRange(1.0, 1.0))
    with pytest.raises(ValueError):
        _clf().fit([Sample(0.5, 5.0)])
