[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dancearcade"
version = "0.1.0"
description = "A small scene-based engine and start screen for a dance arcade game"
requires-python = ">=3.10"
keywords = ["game", "arcade", "dance", "rhythm", "pygame", "scene"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
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
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
dancearcade = "dancearcade.main:main"

[tool.hatch.build.targets.wheel]
packages = ["dancearcade"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
