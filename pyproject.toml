[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "picowallet"
version = "0.1.0"
description = "Hierarchical deterministic Bitcoin wallet core: BIP-39 mnemonics, seeds, encrypted wallet files"
requires-python = ">=3.10"
dependencies = [
    "cryptography",
    "pycryptodome",
]
keywords = ["bitcoin", "wallet", "bip39", "bip32", "mnemonic", "hd-wallet", "cryptography"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Office/Business :: Financial",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["picowallet"]

[tool.hatch.build.targets.sdist]
include = [
    "picowallet",
    "tests",
    "pyproject.toml",
]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
