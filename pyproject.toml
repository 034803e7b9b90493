[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "idiota"
version = "1.0.0"
description = "Compact 64-bit identifiers made of a UNIX timestamp and a random part, encoded in base36"
requires-python = ">=3.10"
dependencies = []
keywords = ["id", "identifier", "base36", "timestamp", "unique"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["idiota"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
