[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hexfield"
version = "0.1.0"
description = "A small turn-based tactical battle on a 15 by 11 grid, with melee, runner and shooter units and a simple computer opponent."
requires-python = ">=3.10"
keywords = ["game", "turn-based", "strategy", "tactics", "grid", "pygame"]
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
    "Topic :: Games/Entertainment :: Turn Based Strategy",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
hexfield = "hexfield.game:main"

[tool.hatch.build.targets.wheel]
packages = ["hexfield"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
