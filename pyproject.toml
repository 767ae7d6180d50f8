[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "searchrace"
version = "0.1.0"
description = "Pod physics simulation and greedy search for a checkpoint racing game"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "racing", "pod", "checkpoint", "search", "game"]
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
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
searchrace = "searchrace.race:main"

[tool.hatch.build.targets.wheel]
packages = ["searchrace"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
