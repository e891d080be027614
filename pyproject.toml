[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mindweaver"
version = "0.1.0"
description = "Data model and editor logic for a node-based visual scripting graph"
requires-python = ">=3.10"
dependencies = []
keywords = ["visual scripting", "node graph", "node editor", "graph"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mindweaver = "mindweaver.app:main"

[tool.hatch.build.targets.wheel]
packages = ["mindweaver"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
