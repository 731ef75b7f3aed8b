[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dendritic"
version = "0.1.0"
description = "A small machine learning toolkit: distances, KNN, naive Bayes, clustering, metrics and a tiny autodiff graph."
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["machine learning", "knn", "naive bayes", "k-means", "autodiff", "metrics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["dendritic"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
