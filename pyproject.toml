[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "sigtalk"
version = "1.0.0"
description = "Bit-level message encoding for one-bit-per-signal chat, with small text and buffer helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["signals", "ipc", "bits", "protocol", "chat", "messaging"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Chat",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["sigtalk*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
