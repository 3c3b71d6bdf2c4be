[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "proofr"
version = "0.1.0"
description = "First-order logic formulas, normal forms, clausification and a given-clause saturation loop"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "logic",
    "first-order logic",
    "theorem proving",
    "superposition",
    "clausification",
    "knuth-bendix ordering",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["proofr"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
