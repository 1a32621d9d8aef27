[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rlgsc"
version = "1.0.1"
description = "Reinforcement-learning gym environment framework for a car-soccer simulation: observations, rewards, actions, terminal conditions and state setters."
requires-python = ">=3.10"
dependencies = []
keywords = ["reinforcement-learning", "gym", "simulation", "car-soccer", "environment"]
classifiers = [
    "Development Status :: 4 - Beta",
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

[tool.hatch.build.targets.wheel]
packages = ["rlgsc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
