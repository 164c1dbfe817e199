[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "endecrypt"
version = "0.1.0"
description = "Interactive byte-level Gronsfeld, Vigenere and Hill ciphers for text and files"
requires-python = ">=3.10"
dependencies = []
keywords = ["cipher", "gronsfeld", "vigenere", "hill", "encryption", "classical-cryptography"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Russian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
endecrypt = "endecrypt.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["endecrypt"]

[tool.pytest.ini_options]
addopts = "-ra"
