[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "metalib"
version = "0.1.0"
description = "Small string, output, linked-list, text-array and collision helpers"
requires-python = ">=3.10"
keywords = ["strings", "linked-list", "text", "utilities", "collision"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Developers",
    "Topic :: Software Development :: Libraries",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["metalib"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
