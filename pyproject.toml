[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "modnine"
version = "0.1.0"
description = "Three small command-line tools: a bitcoin value converter, an RPN calculator and a merge-insertion sorter"
requires-python = ">=3.10"
dependencies = []
keywords = ["rpn", "calculator", "bitcoin", "exchange-rate", "merge-insertion", "sorting"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
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
btc = "modnine.btc:main"
rpn = "modnine.rpn:main"
pmergeme = "modnine.pmergeme:main"

[tool.hatch.build.targets.wheel]
packages = ["modnine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
