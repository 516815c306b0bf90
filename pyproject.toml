[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "clickergame"
version = "0.2.0"
description = "A small clicker game: click the thing, earn points, buy upgrades in a randomized store."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "clicker", "idle", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
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
clickergame = "clickergame.game:main"

[tool.hatch.build.targets.wheel]
packages = ["clickergame"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
