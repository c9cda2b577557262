[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "combat_sorts"
version = "0.1.0"
description = "Turn-based tactical combat rules: character classes, melee attacks and spells with range, cost, cooldown and failure chance"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "turn-based", "tactics", "combat", "spells", "rpg"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Turn Based Strategy",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["combat_sorts"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
