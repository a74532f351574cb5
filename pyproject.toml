[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "designdemos"
version = "0.1.0"
description = "Small runnable demonstrations of classic object-oriented design patterns"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "design-patterns",
    "observer",
    "strategy",
    "template-method",
    "state",
    "prototype",
    "factory-method",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
designdemos-spreadsheet = "designdemos.spreadsheet_cli:main"
designdemos-strategy = "designdemos.strategy:main"
designdemos-boardgames = "designdemos.boardgames:main"
designdemos-pizza = "designdemos.pizza_order:main"
designdemos-prototypes = "designdemos.prototype_manager:main"
designdemos-canvas = "designdemos.canvas:main"

[tool.hatch.build.targets.wheel]
packages = ["designdemos"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
