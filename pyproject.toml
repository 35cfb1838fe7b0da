[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "edgechains"
version = "0.1.0"
description = "Edge chain cleaning, polygonal sampling, line fitting and metachain extraction for contour images"
requires-python = ">=3.10"
dependencies = []
keywords = ["image processing", "contours", "edge chains", "polygonal approximation", "least squares"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Image Processing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["edgechains*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
