[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "obfpl"
version = "0.1.0"
description = "Watch a folder, group arriving files by name and run a YAML-profile-driven command pipeline over them."
requires-python = ">=3.10"
keywords = ["pipeline", "watch", "folder", "automation", "yaml", "profile"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]
dependencies = [
    "pyyaml",
    "watchdog",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
obfpl = "obfpl.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["obfpl"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
