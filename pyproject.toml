[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tfcli"
version = "0.1.0"
description = "Build Terraform CLI invocations: argument lists, environments, version checks and output parsing"
requires-python = ">=3.10"
dependencies = []
keywords = ["terraform", "cli", "infrastructure", "command-line", "automation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: System :: Systems Administration",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tfcli"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
