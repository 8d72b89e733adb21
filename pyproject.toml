[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chnative"
version = "0.1.0"
description = "Client-side building blocks for a columnar database's native protocol: query settings, parameter binding, result rows and a TLS configuration registry."
requires-python = ">=3.10"
keywords = ["database", "native-protocol", "query-settings", "parameter-binding", "sql"]
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
    "Topic :: Database :: Front-Ends",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["chnative"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
