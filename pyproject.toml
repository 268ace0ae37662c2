[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "duckjam"
version = "0.1.0"
description = "A small 2D arcade game: a ducky walks around a screen that wraps at its edges. It has splash, loading, title, credits and gameplay screens."
requires-python = ">=3.10"
keywords = ["game", "pygame", "arcade", "2d", "sprite"]
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
duckjam = "duckjam.app:main"

[tool.hatch.build.targets.wheel]
packages = ["duckjam"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
