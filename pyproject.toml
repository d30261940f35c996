[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kfpwd"
version = "0.1.0"
description = "A small command-line tool that generates random passwords and keeps them in a local SQLite database"
requires-python = ">=3.10"
dependencies = []
keywords = ["password", "generator", "password-manager", "sqlite", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Chinese (Simplified)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
kfpwd = "kfpwd.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["kfpwd"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
