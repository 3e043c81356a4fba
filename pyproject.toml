[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "banksim"
version = "0.1.0"
description = "A small multi-threaded bank simulation contrasting locked and unsynchronised shared state"
requires-python = ">=3.10"
dependencies = []
keywords = ["threading", "concurrency", "race-condition", "simulation", "teaching"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
banksim = "banksim.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["banksim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
