[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tikzkit"
version = "0.13.2"
description = "Editing support for TikZ pictures: command catalogues, syntax highlighting, bracket matching, bookmarks and locating the PGF manual"
requires-python = ">=3.10"
dependencies = []
keywords = ["tikz", "pgf", "latex", "editor", "syntax-highlighting", "completion"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Markup :: LaTeX",
    "Topic :: Text Editors",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tikzkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
