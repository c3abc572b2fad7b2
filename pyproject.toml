[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tihu"
version = "0.1.0"
description = "Persian text analysis front end for speech synthesis: lexicon lookup with affixes and phonetic transcription"
requires-python = ">=3.10"
dependencies = []
keywords = ["persian", "farsi", "text-to-speech", "tts", "lexicon", "g2p", "phonetics", "mbrola"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Natural Language :: Persian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Speech",
    "Topic :: Text Processing :: Linguistic",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tihu"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
