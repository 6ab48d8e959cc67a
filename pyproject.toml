[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "colstore"
version = "0.1.0"
description = "A small column-oriented in-memory table store with a SQL-like query shell and plain-text persistence"
requires-python = ">=3.10"
dependencies = []
keywords = ["database", "column-store", "sql", "shell", "tables"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database :: Database Engines/Servers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
colstore = "colstore.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["colstore"]

[tool.pytest.ini_options]
addopts = "-ra"
