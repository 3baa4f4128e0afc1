[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "amrneighbors"
version = "0.1.0"
description = "Find pairs of antimicrobial-resistance proteins that share 5-mers but differ in AMR class, and align them with DIAMOND"
requires-python = ">=3.10"
dependencies = []
keywords = ["bioinformatics", "protein", "k-mer", "antimicrobial resistance", "diamond", "fasta"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Bio-Informatics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
amrneighbors = "amrneighbors.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["amrneighbors"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
