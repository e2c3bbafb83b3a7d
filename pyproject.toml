[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "linkdeck"
version = "0.1.0"
description = "Keep a prioritised, tagged collection of links and open each one in the browser of your choice."
requires-python = ">=3.10"
keywords = ["links", "bookmarks", "browser", "tags", "reading-list"]
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
    "Topic :: Internet :: WWW/HTTP :: Browsers",
    "Topic :: Utilities",
]
dependencies = [
    "requests",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[project.scripts]
linkdeck = "linkdeck.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["linkdeck"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
