[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lvsim"
version = "0.1.0"
description = "Lotka-Volterra predator-prey simulation with RK4 integration and a parameter grid search"
requires-python = ">=3.10"
dependencies = []
keywords = ["lotka-volterra", "predator-prey", "runge-kutta", "ode", "population dynamics"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
lvsim = "lvsim.model:main"
lvsim-optimize = "lvsim.optimize:main"

[tool.hatch.build.targets.wheel]
packages = ["lvsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
