[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "novachain"
version = "0.1.0"
description = "Core primitives for a small experimental chain: proof-of-history digests, a block data model, key/value storage backends, VM shims and a block simulator."
requires-python = ">=3.10"
dependencies = []
keywords = ["blockchain", "proof-of-history", "simulation", "key-value", "storage"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Environment :: Console",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
nova-cli = "novachain.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["novachain"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
