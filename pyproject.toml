[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vtframe"
version = "0.1.0"
description = "Terminal screen model: cells, draw state, framebuffer, escape-sequence dispatch and frame-diff rendering."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "terminal",
    "vt100",
    "xterm",
    "ansi",
    "escape-sequences",
    "framebuffer",
]
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
    "Topic :: Terminals :: Terminal Emulators/X Terminals",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["vtframe"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
