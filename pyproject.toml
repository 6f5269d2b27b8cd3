[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sandgeon"
version = "0.1.0"
description = "Roguelike dungeon floor model: grid geometry, rooms and tunnels, background tiles, terrain state, entity layers and random layout helpers."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "roguelike",
    "dungeon",
    "procedural-generation",
    "level-generation",
    "tiles",
    "grid",
]
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
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sandgeon"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
