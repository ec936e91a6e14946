[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cryptolab"
version = "0.1.0"
description = "Classical ciphers, toy public-key schemes and number-theory building blocks for studying cryptography"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "cryptography",
    "caesar",
    "vigenere",
    "playfair",
    "hill cipher",
    "rail fence",
    "des s-box",
    "rsa",
    "diffie-hellman",
    "number theory",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Security :: Cryptography",
    "Topic :: Education",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cryptolab = "cryptolab.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cryptolab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
