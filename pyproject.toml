[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ayed"
version = "0.1.0"
description = "Text-editing building blocks: buffers, selections, views with line wrapping, highlighting and layout helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["editor", "text-buffer", "selection", "multi-cursor", "syntax-highlighting", "line-wrap"]
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
    "Topic :: Text Editors",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ayed"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
