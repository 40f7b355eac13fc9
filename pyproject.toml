[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "puzzleres"
version = "1.0.0"
description = "Resource archive packing, localized message tables and text helpers for a logic puzzle game"
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzle", "resources", "localization", "messages", "lexer", "zlib"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Topic :: Software Development :: Internationalization",
    "Topic :: Software Development :: Localization",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["puzzleres"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
