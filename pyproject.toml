[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sorcery"
version = "0.1.0"
description = "A two-player terminal card game of minions, spells and rituals"
requires-python = ">=3.10"
keywords = ["card game", "terminal", "game", "turn based", "ascii"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Turn Based Strategy",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sorcery = "sorcery.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["sorcery"]

[tool.pytest.ini_options]
addopts = "-ra"
