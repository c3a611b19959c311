[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "turtix"
version = "0.1.0"
description = "A side-scrolling platformer: rescue the baby turtles, collect gems and stars, and avoid thorns and enemies."
requires-python = ">=3.10"
keywords = ["game", "platformer", "arcade", "pygame", "side-scroller"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
turtix = "turtix.app:main"

[tool.hatch.build.targets.wheel]
packages = ["turtix"]

[tool.pytest.ini_options]
addopts = "-ra"
