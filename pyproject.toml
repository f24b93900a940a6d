[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "plagcheck"
version = "0.1.0"
description = "Compare two text documents for plagiarism using word n-grams and cosine similarity"
requires-python = ">=3.10"
dependencies = []
keywords = ["plagiarism", "similarity", "n-gram", "cosine", "rabin-karp", "text"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Linguistic",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
plagcheck = "plagcheck.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["plagcheck"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
