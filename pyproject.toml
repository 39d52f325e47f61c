[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "meshgeom"
version = "0.1.0"
description = "Geometry building blocks for 3D viewers: bounding volumes, materials, cameras, parametric surfaces and primitive meshes."
requires-python = ">=3.10"
dependencies = ["numpy"]
keywords = ["3d", "geometry", "mesh", "camera", "parametric surface", "bounding box", "material"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Modeling",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["meshgeom"]

[tool.pytest.ini_options]
addopts = "-ra"
