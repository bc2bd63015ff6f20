[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tankbot"
version = "0.1.0"
description = "A top-down tank battle game where a keyboard-driven tank fights a randomly acting bot."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "tank", "arcade", "pygame", "bot"]
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
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
tankbot = "tankbot.board:main"

[tool.hatch.build.targets.wheel]
packages = ["tankbot"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
