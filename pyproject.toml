[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "flagsdk"
version = "2.4.8"
description = "User contexts and client configuration for a feature flag SDK"
requires-python = ">=3.10"
dependencies = []
keywords = ["feature-flags", "feature-toggles", "configuration", "sdk"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["flagsdk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
