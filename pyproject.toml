[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "platformbrawl"
version = "0.1.0"
description = "A small side-view platform brawler with gravity, jumping and floating platforms"
requires-python = ">=3.10"
keywords = ["game", "platformer", "brawler", "pygame", "arcade"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
platformbrawl = "platformbrawl.game:main"

[tool.hatch.build.targets.wheel]
packages = ["platformbrawl"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
