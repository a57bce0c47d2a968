[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "releval"
version = "0.1.0"
description = "Per-topic retrieval evaluation measures for ranked result lists: precision, MAP, nDCG, bpref, infAP and preference-based measures."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "information retrieval",
    "evaluation",
    "precision",
    "map",
    "ndcg",
    "bpref",
    "infap",
    "preferences",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Information Analysis",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["releval"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
