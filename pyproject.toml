[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "quadgui"
version = "0.4.5"
description = "Immediate-mode GUI building blocks: layout cursor, text editing, styles and mesh batching"
requires-python = ">=3.10"
dependencies = []
keywords = ["gui", "immediate-mode", "layout", "mesh", "text-editor", "undo"]
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
    "Topic :: Software Development :: User Interfaces",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["quadgui"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
