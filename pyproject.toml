[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ruspahy"
version = "0.1.0"
description = "Smoothed particle hydrodynamics simulation of elastoplastic solids with VTK output"
requires-python = ">=3.11"
dependencies = []
keywords = ["sph", "smoothed particle hydrodynamics", "simulation", "plasticity", "damage", "vtk"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ruspahy = "ruspahy.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["ruspahy"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
