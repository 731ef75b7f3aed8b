import math

import numpy as np
import pytest

from dendritic.distance import euclidean
from dendritic.hierarchical import HierarchicalClustering

DATA = np.array(
    [
        [1.0, 1.0],
        [1.5, 1.5],
        [5.0, 5.0],
        [3.0, 4.0],
        [4.0, 4.0],
        [3.0, 3.5],
    ]
)

SMALL = np.array([[0.0, 0.0], [3.0, 4.0], [0.0, 1.0]])


def test_hierarchical_cluster():
    clf = HierarchicalClustering(DATA, euclidean)
    assert clf.data.shape == (6, 2)
    assert clf.distance_matrix.shape == (6, 6)
    assert clf.clusters == []


def test_hierarchical_not_enough_rows():
    with pytest.raises(ValueError, match="Not enough rows in sample data"):
        HierarchicalClustering(np.zeros((1, 1)), euclidean)


def test_calculate_distance_matrix_zero_counts():
    clf = HierarchicalClustering(DATA, euclidean)
    clf.calculate_distance_matrix()
    assert clf.distance_matrix.shape == (6, 6)
    counts = [int(np.count_nonzero(row == 0.0)) for row in clf.distance_matrix]
    assert counts == [6, 5, 4, 3, 2, 1]


def test_calculate_distance_matrix_values():
    clf = HierarchicalClustering(SMALL, euclidean)
    clf.calculate_distance_matrix()
    m = clf.distance_matrix
    assert m[1, 0] == 5.0
    assert m[2, 0] == 1.0
    assert m[2, 1] == pytest.approx(math.sqrt(18.0))
    assert np.all(np.triu(m) == 0.0)


def test_new_with_five_rows():
    data2 = np.array(
        [[0.07, 0.83], [0.85, 0.14], [0.66, 0.89], [0.49, 0.64], [0.80, 0.46]]
    )
    clf = HierarchicalClustering(data2, euclidean)
    assert clf.data.shape == (5, 2)
    assert clf.distance_matrix.shape == (5, 5)


def test_find_min_coord():
    clf = HierarchicalClustering(SMALL, euclidean)
    clf.calculate_distance_matrix()
    assert clf.find_min_coord(clf.distance_matrix) == [2, 0]


def test_find_min_coord_all_zero_raises():
    clf = HierarchicalClustering(SMALL, euclidean)
    with pytest.raises(ValueError):
        clf.find_min_coord(clf.distance_matrix)


def test_fit_transform():
    clf = HierarchicalClustering(SMALL, euclidean)
    with pytest.raises(ValueError):
        clf.fit_transform()
    clf.calculate_distance_matrix()
    assert clf.fit_transform() == [2, 0]


def test_get_comparison_coords():
    clf = HierarchicalClustering(SMALL, euclidean)
    clf.calculate_distance_matrix()
    c1, c2 = clf.get_comparison_coords(1, 0, 2, clf.distance_matrix, [2, 0])
    assert c1 == [1, 0]
    assert c2 == [2, 1]


def test_update_dist_mat():
    clf = HierarchicalClustering(SMALL, euclidean)
    clf.calculate_distance_matrix()
    coord = clf.find_min_coord(clf.distance_matrix)
    new_mat = clf.update_dist_mat(clf.distance_matrix.copy(), coord)
    assert new_mat.shape == (2, 2)
    assert new_mat[0, 0] == 0.0
    assert new_mat[0, 1] == 0.0
    assert new_mat[1, 1] == 0.0
    assert new_mat[1, 0] == pytest.approx(math.sqrt(18.0))
    assert clf.clusters == [0]