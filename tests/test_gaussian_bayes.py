import math

import numpy as np
import pytest

from dendritic.gaussian_bayes import GaussianNB

CLASS0 = [
    [1.8, 74.5],
    [3.8, 59.5],
    [2.8, 69.5],
    [2.8, 64.5],
]
CLASS1 = [
    [2.1, 73.5],
    [0.9, 58.5],
    [2.1, 70.5],
    [0.9, 61.5],
    [2.3, 69.0],
    [0.7, 63.0],
    [1.9, 69.0],
    [1.1, 63.0],
    [1.9, 66.0],
    [1.1, 66.0],
]
FEATURES = np.array(CLASS0 + CLASS1, dtype=float)
TARGET = np.array([0.0] * 4 + [1.0] * 10).reshape(14, 1)


@pytest.fixture
def clf():
    return GaussianNB(FEATURES, TARGET)


def test_construction(clf):
    assert clf.features.shape == (14, 2)
    assert clf.outputs.shape == (14, 1)


def test_construction_mismatched_rows():
    bad = np.array([1.0, 2.0]).reshape(2, 1)
    with pytest.raises(ValueError, match="Feature rows must match output rows"):
        GaussianNB(FEATURES, bad)


def test_build_likelihoods(clf):
    assert clf.likelihoods.shape == (2, 2, 2)
    assert clf.likelihoods[0].ravel().tolist() == pytest.approx(
        [2.8000000000000003, 0.8164965809277259, 67.0, 6.454972243679028], rel=1e-12
    )
    assert clf.likelihoods[1].ravel().tolist() == pytest.approx(
        [1.5, 0.6110100926607787, 66.0, 4.58257569495584], rel=1e-12
    )


def test_predict_feature(clf):
    assert clf.predict_feature(0, 2.6, 0.0) == pytest.approx(0.47416212535677055, rel=1e-9)
    assert clf.predict_feature(0, 2.6, 1.0) == pytest.approx(0.12914332487788097, rel=1e-9)
    assert clf.predict_feature(1, 70.0, 0.0) == pytest.approx(0.0554768613640256, rel=1e-9)
    assert clf.predict_feature(1, 70.0, 1.0) == pytest.approx(0.05947780073027187, rel=1e-9)


def test_fit_row(clf):
    assert clf.fit_row(np.array([2.8, 67.0])) == 0.0
    assert clf.fit_row(np.array([1.5, 66.0])) == 1.0


def test_fit_row_bad_shape(clf):
    bad_row = np.array([0.8, 59.0]).reshape(1, 2)
    with pytest.raises(ValueError, match="row sample not equal to features column count"):
        clf.fit_row(bad_row)


def test_fit(clf):
    preds = clf.fit(np.array([[2.8, 67.0], [1.5, 66.0]]))
    assert preds.shape == (2, 1)
    assert preds.ravel().tolist() == [0.0, 1.0]


def test_fit_matches_fit_row(clf):
    preds = clf.fit(FEATURES)
    assert preds.shape == (14, 1)
    assert preds.ravel().tolist() == [clf.fit_row(row) for row in FEATURES]
    assert set(preds.ravel().tolist()) <= {0.0, 1.0}


def test_fit_bad_shape(clf):
    bad = np.array([0.8, 59.0]).reshape(2, 1)
    with pytest.raises(ValueError, match="row sample not equal to features column count"):
        clf.fit(bad)


def test_save_load(clf, tmp_path):
    model_dir = tmp_path / "models" / "weather"
    clf.save(model_dir)
    assert (model_dir / "likelihoods").is_file()

    restored = GaussianNB.load(model_dir, FEATURES, TARGET)
    assert np.array_equal(restored.likelihoods, clf.likelihoods)
    assert restored.fit(FEATURES).tolist() == clf.fit(FEATURES).tolist()


def test_single_sample_class_has_nan_deviation():
    features = np.array([[1.0], [2.0], [3.0]])
    target = np.array([[0.0], [1.0], [1.0]])
    model = GaussianNB(features, target)
    assert math.isnan(model.likelihoods[0, 0, 1])
    assert model.likelihoods[1, 0].tolist() == pytest.approx([2.5, math.sqrt(0.5)])