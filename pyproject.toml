[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "quizdrill"
version = "0.1.0"
description = "An interactive multiple-choice aptitude quiz for the terminal"
requires-python = ">=3.10"
dependencies = []
keywords = ["quiz", "aptitude", "multiple-choice", "practice", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Vietnamese",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education :: Testing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
quizdrill = "quizdrill.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["quizdrill"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
