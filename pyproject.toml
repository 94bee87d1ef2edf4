[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rasterpot"
version = "0.1.0"
description = "A small software rasterizer: transforms, depth-buffered triangle filling, texturing and diffuse lighting."
requires-python = ">=3.10"
dependencies = ["numpy"]
keywords = ["rasterizer", "software rendering", "3d", "graphics", "z-buffer"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rasterpot"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
