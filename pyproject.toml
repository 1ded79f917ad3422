[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "unrealize"
version = "0.1.0"
description = "A small two-dimensional N-body gravity simulator with an interactive solar-system view"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["physics", "n-body", "gravity", "simulation", "solar system", "orbits"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
unrealize = "unrealize.app:main"

[tool.hatch.build.targets.wheel]
packages = ["unrealize"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
