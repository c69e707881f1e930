[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "quilledit"
version = "0.1.0"
description = "A small Tk text editor built on a piece table, with KMP search, undo/redo, zoom and bracket matching."
requires-python = ">=3.10"
dependencies = []
keywords = ["text editor", "piece table", "undo", "kmp", "bracket matching", "tkinter"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
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

[project.scripts]
quilledit = "quilledit.app:main"

[tool.hatch.build.targets.wheel]
packages = ["quilledit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
