[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "recordfiles"
version = "0.1.0"
description = "Small text-file utilities and fixed-size binary record stores for books, employees and bank accounts"
requires-python = ">=3.10"
dependencies = []
keywords = ["files", "records", "binary", "text", "word count", "utilities"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
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
recordfiles-text = "recordfiles.textfiles:main"
recordfiles-books = "recordfiles.books:main"
recordfiles-bank = "recordfiles.bank:main"
recordfiles-employees = "recordfiles.employees:main"

[tool.hatch.build.targets.wheel]
packages = ["recordfiles"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
