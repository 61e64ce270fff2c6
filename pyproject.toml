[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fpsassets"
version = "0.1.0"
description = "Asset loading and geometry preparation for a small first-person game: OBJ meshes, BMP/DDS textures, VBO indexing, tangent space, text quads, map and minimap data."
requires-python = ">=3.10"
dependencies = []
keywords = ["obj", "wavefront", "bmp", "dds", "mesh", "vbo", "tangent-space", "game", "minimap"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: First Person Shooters",
    "Topic :: Multimedia :: Graphics :: 3D Modeling",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fpsassets"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
