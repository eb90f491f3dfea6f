[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "scenic_local"
version = "0.1.0"
description = "Image store, UTF-8 decoding, glyph blur and bit helpers for a local scene renderer"
requires-python = ">=3.10"
keywords = ["image", "rgba", "utf-8", "blur", "mergesort", "renderer"]
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
    "Topic :: Multimedia :: Graphics",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[tool.hatch.build.targets.wheel]
packages = ["scenic_local"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
