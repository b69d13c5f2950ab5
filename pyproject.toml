[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ft8rx"
version = "0.1.0"
description = "FT8 message unpacking, callsign hashing, duplicate suppression and spot reporting"
requires-python = ">=3.10"
dependencies = []
keywords = ["ft8", "ham radio", "amateur radio", "callsign", "pskreporter", "ipfix"]
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
    "Topic :: Communications :: Ham Radio",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["ft8rx"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
