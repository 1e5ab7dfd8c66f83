[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hexcolony"
version = "0.1.0"
description = "Hex-grid colony simulation core: procedural terrain, fog of war, territories, buildings and a goods economy"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "hex",
    "hexagonal grid",
    "simulation",
    "game",
    "terrain generation",
    "perlin noise",
    "economy",
]
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

[tool.hatch.build.targets.wheel]
packages = ["hexcolony"]

[tool.pytest.ini_options]
addopts = "-ra"
