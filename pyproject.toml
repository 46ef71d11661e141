[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "logicfuzz"
version = "0.1.0"
description = "Propositional formula builder with simplification, normalization and a deterministic fuzzer"
requires-python = ">=3.10"
dependencies = []
keywords = ["logic", "boolean", "formula", "simplification", "fuzzing", "testing"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Testing",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
logicfuzz = "logicfuzz.fuzzer:main"
logicfuzz-demo = "logicfuzz.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["logicfuzz"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
