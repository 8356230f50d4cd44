[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xylux"
version = "0.1.0"
description = "Editor core for Rust and Alux game projects: text buffers, file tree, status bar, menus and tool panels"
requires-python = ">=3.10"
dependencies = []
keywords = ["ide", "editor", "rust", "alux", "game-development"]
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
    "Topic :: Text Editors :: Integrated Development Environments (IDE)",
    "Topic :: Software Development",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["xylux"]

[tool.pytest.ini_options]
addopts = "-ra"
