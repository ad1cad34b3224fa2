[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nigiri"
version = "0.1.0"
description = "Building blocks for public transport timetables: intervals, time deltas, timetable directories, transport classes, Pareto sets and footpath graphs"
requires-python = ">=3.10"
dependencies = []
keywords = ["transit", "timetable", "routing", "footpaths", "pareto", "zip"]
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
    "Topic :: Scientific/Engineering :: GIS",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["nigiri"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
