[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "plotkit"
version = "0.13.0"
description = "GUI-free parts of a live plotting tool: snapshots, zoom and scroll logic, value labels and update checks"
requires-python = ">=3.10"
dependencies = []
keywords = ["plotting", "oscilloscope", "snapshot", "csv", "zoom", "scrollbar", "version"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Visualization",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
plotkit-update-check = "plotkit.updatechecker:main"

[tool.hatch.build.targets.wheel]
packages = ["plotkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
