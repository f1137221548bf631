[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ninekit"
version = "0.1.0"
description = "Three small command-line tools: a historical bitcoin price converter, a reverse Polish notation calculator and a Ford-Johnson merge-insertion sorter"
requires-python = ">=3.10"
dependencies = []
keywords = ["bitcoin", "exchange-rate", "rpn", "calculator", "merge-insertion", "ford-johnson", "sorting"]
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
btc = "ninekit.btc:main"
rpn = "ninekit.rpn:main"
pmergeme = "ninekit.pmerge_cli:main"

[tool.hatch.build.targets.wheel]
packages = ["ninekit"]

[tool.pytest.ini_options]
addopts = "-ra"
