[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wordseg"
version = "0.1.0"
description = "HMM word segmentation, keyword extraction, simhash fingerprints, INI/config reading and word-frequency dictionary building"
requires-python = ">=3.10"
dependencies = []
keywords = ["segmentation", "chinese", "hmm", "viterbi", "simhash", "tf-idf", "textrank", "ini", "dictionary"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Natural Language :: Chinese (Simplified)",
    "Natural Language :: English",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Indexing",
    "Topic :: Text Processing :: Linguistic",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["wordseg"]

[tool.pytest.ini_options]
addopts = "-ra"
