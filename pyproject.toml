[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ballgame"
version = "0.1.0"
description = "A small arcade game: steer a ball, collect stars, dodge bouncing enemies."
requires-python = ">=3.10"
keywords = ["game", "arcade", "pygame", "ball"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
ballgame = "ballgame.app:main"
ballgame-people = "ballgame.people:main"

[tool.hatch.build.targets.wheel]
packages = ["ballgame"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
