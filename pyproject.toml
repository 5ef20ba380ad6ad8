[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "scratchpad"
version = "0.1.0"
description = "Small programs for learning: sorting algorithms, subset sum, a tiny ray caster, TGA writing, bit tricks and more"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "education",
    "algorithms",
    "sorting",
    "merge-sort",
    "quicksort",
    "subset-sum",
    "ray-casting",
    "ppm",
    "tga",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
scratchpad-sort = "scratchpad.sorting:main"
scratchpad-subset-sum = "scratchpad.subsetsum:main"
scratchpad-subset-sum-gen = "scratchpad.subsetsum:generate_main"
scratchpad-subsequence = "scratchpad.subsequence:main"
scratchpad-tree = "scratchpad.tree:main"
scratchpad-raytrace = "scratchpad.raytrace:main"
scratchpad-tga = "scratchpad.tga:main"
scratchpad-bits = "scratchpad.bits:main"
scratchpad-option = "scratchpad.option:main"
scratchpad-dispatch = "scratchpad.dispatch:main"
scratchpad-repl = "scratchpad.repl:main"
scratchpad-search = "scratchpad.search:main"

[tool.hatch.build.targets.wheel]
packages = ["scratchpad"]

[tool.pytest.ini_options]
addopts = "-ra"
