[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "libunit"
version = "0.1.0"
description = "A small unit-test runner that reports each test's outcome in framed, coloured output, with a printf-style formatter."
requires-python = ">=3.10"
dependencies = []
keywords = ["testing", "unit-test", "runner", "report", "printf"]
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
    "Topic :: Software Development :: Testing :: Unit",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
libunit = "libunit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["libunit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
