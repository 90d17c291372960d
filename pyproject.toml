[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "acmis"
version = "1.0.0"
description = "A terminal account manager with a cash account, a stock portfolio priced from two quote tables, and an integer-set tool"
requires-python = ">=3.10"
dependencies = []
keywords = ["portfolio", "stocks", "bank account", "ledger", "command line", "integer set"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: English",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Investment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
acmis = "acmis.cli:main"
acmis-sets = "acmis.integer_set:main"

[tool.hatch.build.targets.wheel]
packages = ["acmis"]

[tool.pytest.ini_options]
addopts = "-ra"
