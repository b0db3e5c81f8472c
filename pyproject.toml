[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "qhash"
version = "0.3.0"
description = "Compute checksums of files and read and write md5sum-style checksum lists"
requires-python = ">=3.10"
dependencies = []
keywords = ["checksum", "hash", "md4", "md5", "md5sum", "sha1", "sha256", "sha512"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
qhash = "qhash.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["qhash"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
