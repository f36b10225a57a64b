[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "myrpg"
version = "0.1.0"
description = "Building blocks of a small top-down role-playing game: config loading, movement, collisions, inventory, dialogue, boss battles and a title menu."
requires-python = ">=3.10"
keywords = ["rpg", "game", "pygame", "inventory", "battle"]
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
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["myrpg"]

[tool.pytest.ini_options]
addopts = "-ra"
