[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "labworks"
version = "1.0.0"
description = "Small numeric, text and interpreter utilities: extended printf/scanf, base conversion, bit-vector and memory-cell interpreters, word trees and more."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "printf",
    "scanf",
    "roman numerals",
    "zeckendorf",
    "number bases",
    "interpreter",
    "binary tree",
    "norms",
    "bisection",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
labworks-strtools = "labworks.strtools:main"
labworks-means = "labworks.means:main"
labworks-substring = "labworks.substring:main"
labworks-convexity = "labworks.convexity:main"
labworks-kaprekar = "labworks.kaprekar:main"
labworks-overprintf = "labworks.overprintf:main"
labworks-overscanf = "labworks.overscanf:main"
labworks-bisection = "labworks.bisection:main"
labworks-column-sum = "labworks.column_sum:main"
labworks-finite-fractions = "labworks.finite_fractions:main"
labworks-taylor = "labworks.taylor:main"
labworks-bitbase = "labworks.bitbase:main"
labworks-norms = "labworks.norms:main"
labworks-employees = "labworks.employees:main"
labworks-word-tree = "labworks.word_tree:main"
labworks-bracket-tree = "labworks.bracket_tree:main"
labworks-macros = "labworks.macros:main"
labworks-bitvectors = "labworks.bitvectors:main"
labworks-memcells = "labworks.memcells:main"

[tool.hatch.build.targets.wheel]
packages = ["labworks"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
