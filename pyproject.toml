[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "delvekit"
version = "0.1.0"
description = "Entities, stats, status effects, encounters and procedural dungeon floors for turn-based roguelikes"
requires-python = ">=3.10"
dependencies = []
keywords = ["roguelike", "dungeon", "procedural-generation", "rpg", "turn-based", "entity-component"]
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
    "Topic :: Games/Entertainment :: Role-Playing",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["delvekit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
