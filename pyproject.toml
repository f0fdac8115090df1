[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "starhaul"
version = "0.1.0"
description = "Plan the cheapest sequence of moves, pickups and drop-offs for a cargo hauler"
requires-python = ">=3.10"
dependencies = []
keywords = ["planning", "search", "logistics", "hauler", "simulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
starhaul = "starhaul.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["starhaul"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
