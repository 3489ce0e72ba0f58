[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bencodec"
version = "0.1.0"
description = "Decode and encode bencoded text as native Python values"
requires-python = ">=3.10"
keywords = ["bencode", "bittorrent", "decoder", "encoder", "serialization"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: File Formats",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bencodec"]

[tool.pytest.ini_options]
addopts = "-ra"
