[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "pixcells"
version = "0.1.0"
description = "Pixel-art document model: layered animation frames, blending, rasterising primitives, PNG and the PIXC project format"
requires-python = ">=3.10"
dependencies = ["pillow"]
keywords = ["pixel-art", "sprite", "animation", "raster", "png", "sprite-sheet"]
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
    "Topic :: Multimedia :: Graphics :: Editors :: Raster-Based",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools]
packages = ["pixcells"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
