[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "viuer"
version = "0.9.1"
description = "Display images in the terminal"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["terminal", "image", "kitty", "iterm", "ansi", "half-block"]
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
    "Topic :: Multimedia :: Graphics :: Viewers",
    "Topic :: Terminals",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["viuer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
