[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rawview"
version = "0.1.0"
description = "Decode raw RGB and YUV frame dumps into RGB pixels and 24-bit BMP files"
requires-python = ">=3.10"
dependencies = []
keywords = ["yuv", "rgb", "raw", "nv12", "nv21", "yv12", "i420", "bmp", "image", "decode"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rawview = "rawview.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["rawview"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
