[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bendkit"
version = "0.1.0"
description = "Compiler passes for interaction-net programs: eta reduction, inlining, pruning, size and cycle checks, readback nets and an imperative front-end AST."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "compiler",
    "interaction-nets",
    "interaction-combinators",
    "hvm",
    "optimization",
    "functional-programming",
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
    "Topic :: Software Development :: Compilers",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bendkit"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
