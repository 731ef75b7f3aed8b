# dendritic

A small, readable machine learning toolkit built on NumPy. It is meant for
learning and experimentation rather than production use.

Functions and classes accept anything NumPy can turn into a float array.
Errors the library detects, such as mismatched shapes or row counts, are
raised as `ValueError`.

## Modules

- `dendritic.activations`: `sigmoid`, `relu` (scalars), `sigmoid_vec`,
  `sigmoid_prime`, `softmax` (element by element, shape kept) and
  `softmax_prime` (the softmax Jacobian, shape `(n, n)`).
- `dendritic.loss`: `mse`, `binary_cross_entropy`, `categorical_cross_entropy`.
- `dendritic.metric_utils`: `apply` (runs a function over each slice along an
  axis), `gini_impurity`, `entropy` (in bits).
- `dendritic.distance`: `euclidean`, `manhattan`. Both require points of the
  same shape.
- `dendritic.knn`: `calculate_distances` (sorted `(distance, row)` pairs),
  `KNN` (majority vote, ties go to the smaller class) and `KNNRegressor`
  (mean of neighbour targets). Both are built with the class method
  `fit(features, outputs, k, distance_metric)`.
- `dendritic.bayes_shared`: `class_idxs`, `class_probabilities`,
  `gaussian_probability`.
- `dendritic.naive_bayes`: `NaiveBayes`, a naive Bayes classifier for discrete
  feature values, built from frequency and likelihood tables.
- `dendritic.gaussian_bayes`: `GaussianNB`, which keeps a mean and a sample
  standard deviation for each class and feature.
- `dendritic.k_means`: `KMeans`, seeded with the first `k` rows of the data.
- `dendritic.hierarchical`: `HierarchicalClustering`. This holds the building
  blocks of agglomerative clustering only (see below).
- `dendritic.node`, `dendritic.ops`, `dendritic.regularizers`: a small
  computation graph with `Node`, `Value`, `Dot`, `ScaleAdd`, `Regularization`,
  `L2Regularization` and `L1Regularization`.

The classifiers number classes by index. Index 0 is the smallest label in the
targets, index 1 the next, and so on.

## Installation

```
pip install .
```

## Examples

K nearest neighbours:

```python
import numpy as np
from dendritic.knn import KNN
from dendritic.distance import euclidean

features = np.array([[1.0, 2.0], [2.0, 3.0], [8.0, 9.0], [9.0, 9.5]])
targets = np.array([[0.0], [0.0], [1.0], [1.0]])

clf = KNN.fit(features, targets, 3, euclidean)
print(clf.predict(np.array([[1.5, 2.5], [8.5, 9.0]])))  # shape (2, 1)
```

Gaussian naive Bayes:

```python
from dendritic.gaussian_bayes import GaussianNB

model = GaussianNB(features, targets)
predictions = model.fit(features)     # class index per row, shape (rows, 1)
model.save("model_dir")               # writes model_dir/likelihoods
restored = GaussianNB.load("model_dir", features, targets)
```

`NaiveBayes(features, outputs).fit(row)` takes a single row. It returns the
index of the most probable class.

K-means:

```python
from dendritic.k_means import KMeans

km = KMeans(features, 2, 5, euclidean)
clusters = km.fit()          # nearest-centroid index per row, shape (rows, 1)
```

A linear layer as a computation graph:

```python
from dendritic.node import Value
from dendritic.ops import Dot, ScaleAdd

inputs = Value(np.ones((5, 3)))
weights = Value(np.zeros((3, 1)))
bias = Value(np.ones((1, 1)))

linear = ScaleAdd(Dot(inputs, weights), bias)
linear.forward()
linear.backward(linear.value - np.arange(5.0).reshape(5, 1))
print(inputs.grad)   # rhs.T @ g, shape (3, 1)
```

`Dot(rhs, lhs)` computes `rhs @ lhs`. On the backward pass it sends
`rhs.T @ g` to `rhs` and `g @ lhs.T` to `lhs`. `ScaleAdd` passes the
gradient unchanged to both inputs. The regularizers store a weight update in
their own `grad` and leave their inputs alone.

## What the package does not do

- It has no dataset loaders and reads no CSV or Parquet files. You supply
  arrays yourself.
- `HierarchicalClustering` does not build a full clustering or dendrogram.
  It can fill a lower-triangular distance matrix
  (`calculate_distance_matrix`), find the closest pair (`find_min_coord`,
  `fit_transform`) and merge one pair at a time (`update_dist_mat`).
- There is no command-line tool.

## Running the tests

```
pip install .[test]
pytest
```