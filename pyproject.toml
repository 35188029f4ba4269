[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "backwalls"
version = "0.1.0"
description = "Procedural thick-wall mesh generation with doorways and rectangular, circular and irregular holes"
requires-python = ">=3.10"
dependencies = []
keywords = ["procedural", "mesh", "geometry", "walls", "level-generation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Modeling",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["backwalls"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
