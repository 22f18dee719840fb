[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "seika"
version = "0.1.0"
description = "Game framework building blocks: containers, spatial hashing, events, command-line parsing, file and asset loading, and a small entity-component-system."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "ecs", "entity-component-system", "spatial-hash", "data-structures", "assets"]
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
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["seika"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
