[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pixelcanvas"
version = "0.1.0"
description = "Classic raster scan-conversion algorithms: lines, circles, ellipses, curves, polygon filling and clipping"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "raster",
    "drawing",
    "bresenham",
    "midpoint",
    "bezier",
    "clipping",
    "scanline",
    "computer-graphics",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Multimedia :: Graphics :: Editors :: Raster-Based",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["pixelcanvas"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
ignore_missing_imports = true
