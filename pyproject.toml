[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "notebrowse"
version = "0.1.0"
description = "A terminal browser for Markdown notes with a folder sidebar and rendered preview"
requires-python = ">=3.10"
keywords = ["notes", "markdown", "terminal", "tui", "notebook"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: News/Diary",
    "Topic :: Text Processing :: Markup :: Markdown",
]
dependencies = [
    "pyyaml",
    "rich",
    "blessed",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
notebrowse = "notebrowse.app:main"

[tool.hatch.build.targets.wheel]
packages = ["notebrowse"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
