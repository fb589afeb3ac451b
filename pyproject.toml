[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spanda"
version = "0.8.0"
description = "Animation building blocks: easing curves, Catmull-Rom splines, clocks, colour interpolation and drag tracking."
requires-python = ">=3.10"
dependencies = []
keywords = ["animation", "easing", "spline", "interpolation", "colour", "gamedev"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["spanda"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
