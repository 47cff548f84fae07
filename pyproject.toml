[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "embedkit"
version = "0.1.0"
description = "Small utilities for embedded-style code: baud rates, error messages, colour conversion, PID and fixed-point helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["embedded", "pid", "hsv", "rgb", "baudrate", "utilities"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["embedkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
