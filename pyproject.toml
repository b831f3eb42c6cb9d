[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "railsched"
version = "0.1.0"
description = "Railway network and train schedule file parsing, time conversion and settings for rail simulations"
requires-python = ">=3.10"
dependencies = []
keywords = ["railway", "simulation", "schedule", "parser", "trains"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
railsched = "railsched.cli:main"

[tool.setuptools.packages.find]
include = ["railsched*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
