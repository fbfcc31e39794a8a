[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "uniregistry"
version = "0.1.0"
description = "A small university register of professors, students, courses and grades with CSV storage."
requires-python = ">=3.10"
dependencies = []
keywords = ["university", "registry", "students", "professors", "courses", "grades", "csv"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Natural Language :: Greek",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
uniregistry = "uniregistry.registry:main"

[tool.hatch.build.targets.wheel]
packages = ["uniregistry"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
