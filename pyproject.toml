[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "focuscheck"
version = "0.1.0"
description = "Decide whether BMP photographs are sharp or blurry from their Fourier spectrum"
requires-python = ">=3.10"
dependencies = ["numpy"]
keywords = ["bmp", "fft", "focus", "blur", "sharpness", "image"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Image Processing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
focuscheck = "focuscheck.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["focuscheck"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
