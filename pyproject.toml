[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "crabkit"
version = "0.1.0"
description = "A terminal roguelike, with building blocks for a small shell: word counters, count tables and a command-line representation"
requires-python = ">=3.10"
dependencies = []
keywords = ["roguelike", "terminal", "game", "dungeon", "shell", "wc", "counters"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
crab-knight = "crabkit.roguelike.term:main"

[tool.hatch.build.targets.wheel]
packages = ["crabkit"]

[tool.hatch.build.targets.sdist]
include = ["crabkit", "tests", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
