[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "coursekit"
version = "0.1.0"
description = "Small teaching library: Euclidean vectors, word ladders, stacks, fixed arrays and a bookstore tally"
requires-python = ">=3.10"
dependencies = []
keywords = ["education", "vector", "word-ladder", "stack", "data-structures"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
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
coursekit-ladder = "coursekit.word_ladder:main"
coursekit-factorial = "coursekit.factorial:main"
coursekit-bookstore = "coursekit.bookstore:main"

[tool.hatch.build.targets.wheel]
packages = ["coursekit"]

[tool.pytest.ini_options]
addopts = "-ra"
