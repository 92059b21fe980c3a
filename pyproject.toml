[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pastel"
version = "0.1.0"
description = "Color conversion, manipulation, parsing, mixing and color scales across RGB, HSL, XYZ, LMS, Lab, LCh and CMYK"
requires-python = ">=3.10"
dependencies = []
keywords = ["color", "colour", "rgb", "hsl", "lab", "lch", "cmyk", "contrast", "css"]
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
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pastel"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
