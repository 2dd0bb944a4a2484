[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "parkinglot"
version = "0.1.0"
description = "A small vehicle parking lot: slot allocation by vehicle type, tickets, hourly fees and text receipts."
requires-python = ">=3.10"
dependencies = []
keywords = ["parking", "parking-lot", "tickets", "fees", "receipts"]
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
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
parkinglot = "parkinglot.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["parkinglot"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
