[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bitpress"
version = "0.1.0"
description = "Bit-level stream utilities and small byte compression codecs (identity, simple prefix codes, Huffman)"
requires-python = ">=3.10"
dependencies = []
keywords = ["compression", "huffman", "bitstream", "prefix-code", "codec"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Archiving :: Compression",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bitpress = "bitpress.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bitpress"]

[tool.pytest.ini_options]
addopts = "-ra"
