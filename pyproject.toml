[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "playdeck"
version = "0.1.0"
description = "A tiled game menu with fade transitions, hosting Blackjack and Yacht table games"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "menu", "blackjack", "yacht", "dice", "cards", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Japanese",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
playdeck = "playdeck.app:main"

[tool.hatch.build.targets.wheel]
packages = ["playdeck"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
