[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hackvm"
version = "0.1.0"
description = "Translator from Hack VM stack code to Hack assembly"
requires-python = ">=3.10"
dependencies = []
keywords = ["hack", "vm", "nand2tetris", "assembly", "translator", "compiler"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hackvm = "hackvm.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["hackvm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
