[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "netlayout"
version = "0.1.0"
description = "Geometry, labels, viewport scrolling, file name rules, font resolution and numeric helpers for reaction network layouts"
requires-python = ">=3.10"
keywords = ["layout", "reaction network", "curve", "bounding box", "units", "error weights", "fonts"]
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
    "Topic :: Scientific/Engineering :: Bio-Informatics",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["netlayout"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
