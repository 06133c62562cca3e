[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fastpasta"
version = "0.1.0"
description = "Decode, inspect and write ALICE ITS readout data: RDH CRU headers, status words and data words."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "alice",
    "its",
    "readout",
    "rdh",
    "cru",
    "raw-data",
    "particle-physics",
    "binary-format",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: File Formats",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fastpasta"]

[tool.hatch.build.targets.sdist]
include = ["fastpasta", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
