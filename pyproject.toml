[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algodeck"
version = "0.1.0"
description = "A collection of classic algorithms, data structures and small console programs."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "sorting",
    "searching",
    "graphs",
    "backtracking",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algodeck-numbers = "algodeck.numbers:main"
algodeck-dijkstra = "algodeck.graphs:main"
algodeck-maze = "algodeck.maze:main"
algodeck-calculator = "algodeck.calculator:main"
algodeck-games = "algodeck.games:main"
algodeck-hospital = "algodeck.hospital:main"
algodeck-records = "algodeck.records:main"
algodeck-todo = "algodeck.todo:main"

[tool.hatch.build.targets.wheel]
packages = ["algodeck"]

[tool.hatch.build.targets.sdist]
include = ["algodeck", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
