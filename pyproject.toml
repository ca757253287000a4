[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "embedkit"
version = "0.1.0"
description = "Small utilities for embedded-style work: waveform generators, float bit tools, running statistics, bit sets, three-valued logic, XML writing and I2C device drivers"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "embedded",
    "i2c",
    "sensors",
    "statistics",
    "function-generator",
    "ieee754",
    "xml",
    "three-valued-logic",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Embedded Systems",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["embedkit"]

[tool.hatch.build.targets.sdist]
include = ["embedkit", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
