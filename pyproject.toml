[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "streetrouter"
version = "0.1.0"
description = "Street graph routing: Delaunay-triangulated node graphs, obstacles and A* routes over geographic coordinates"
requires-python = ">=3.10"
keywords = ["routing", "graph", "a-star", "delaunay", "haversine", "gis"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: GIS",
]
dependencies = [
    "numpy",
    "scipy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["streetrouter"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
