"""Small machine learning toolkit: metrics, distances, KNN, Bayes, clustering and autodiff."""

__version__ = "0.1.0"