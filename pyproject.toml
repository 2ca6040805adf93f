[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arxia"
version = "0.1.0"
description = "Offline-first block lattice ledger with mesh gossip, CRDT reconciliation and ORV consensus"
requires-python = ">=3.10"
dependencies = [
    "cryptography",
]
keywords = [
    "block-lattice",
    "ledger",
    "consensus",
    "crdt",
    "vector-clock",
    "gossip",
    "mesh",
    "offline-first",
    "ed25519",
    "blake3",
    "did",
]
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
    "Topic :: System :: Distributed Computing",
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
arxia-cli = "arxia.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["arxia"]

[tool.hatch.build.targets.sdist]
include = [
    "arxia",
    "tests",
]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
