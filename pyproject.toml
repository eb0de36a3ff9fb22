[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "solz"
version = "0.1.0"
description = "A small 2D arcade game: a duck walking around a wrapping window, with splash, title, pause, settings and credits screens."
requires-python = ">=3.10"
keywords = ["game", "arcade", "pygame", "2d"]
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
solz = "solz.app:main"

[tool.hatch.build.targets.wheel]
packages = ["solz"]

[tool.pytest.ini_options]
addopts = "-ra"
