[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ordinals"
version = "0.1.0"
description = "Ordinal theory primitives: sat arithmetic, epochs, inscriptions and sat-range encoding"
requires-python = ">=3.10"
dependencies = []
keywords = ["bitcoin", "ordinals", "inscriptions", "sats", "satoshis"]
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
    "Topic :: Office/Business :: Financial",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ordinals"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
