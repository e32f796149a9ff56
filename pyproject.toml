[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chartkit"
version = "0.1.0"
description = "Chart layout primitives: boxes, ranges, series, palettes and the layout of line, bar and donut charts."
requires-python = ">=3.10"
keywords = ["chart", "plot", "graph", "layout", "series", "bollinger"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
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
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["chartkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
