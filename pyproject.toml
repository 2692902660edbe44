[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "warehousesim"
version = "1.1.0"
description = "Warehouse robot simulation: layout, shelf stock, potential-field motion planning and manual robot control."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "warehouse",
    "robots",
    "simulation",
    "motion-planning",
    "potential-field",
    "logistics",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
warehousesim = "warehousesim.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["warehousesim"]

[tool.hatch.build.targets.sdist]
include = ["warehousesim", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
