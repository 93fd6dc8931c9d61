[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dirac-nav"
version = "0.1.0"
description = "Discrete grid navigation for multi-agent robots: direction codes become timed velocity sequences, and poses are snapped to grid cells, on an in-process message bus."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "robotics",
    "navigation",
    "grid",
    "multi-agent",
    "publish-subscribe",
    "simulation",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Human Machine Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
discrete-navigation-controller = "dirac_nav.controller_node:main"
grid-pose-publisher = "dirac_nav.grid_pose:main"

[tool.hatch.build.targets.wheel]
packages = ["dirac_nav"]

[tool.hatch.build.targets.sdist]
include = ["dirac_nav", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
