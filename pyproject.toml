[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bnposeidon"
version = "0.1.0"
description = "Poseidon permutation and sponge hashing over the BN254 scalar field, absorbing Goldilocks field elements"
requires-python = ">=3.10"
dependencies = []
keywords = ["poseidon", "bn254", "goldilocks", "hash", "sponge", "zero-knowledge"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Security :: Cryptography",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["bnposeidon"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
