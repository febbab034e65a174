[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "leniasim"
version = "0.1.0"
description = "Particle-grid Lenia model: grid layout, kernel profiles, settings, colours and window-placement helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["lenia", "cellular-automata", "artificial-life", "simulation", "kernel"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Artificial Life",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["leniasim"]

[tool.pytest.ini_options]
addopts = "-ra"
