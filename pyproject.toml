[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "avlmerge"
version = "0.1.0"
description = "AVL trees, natural-selection run generation and winner-tree multiway merging for external sorting"
requires-python = ">=3.10"
dependencies = []
keywords = ["avl", "balanced tree", "external sort", "natural selection", "winner tree", "merge"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
avlmerge-avl = "avlmerge.avl:main"
avlmerge-generate = "avlmerge.generator:main"
avlmerge-partition = "avlmerge.natural_selection:main"
avlmerge-merge = "avlmerge.merge:main"

[tool.hatch.build.targets.wheel]
packages = ["avlmerge"]

[tool.pytest.ini_options]
addopts = "-ra"
