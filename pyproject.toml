[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "crawltools"
version = "0.1.0"
description = "Building blocks for a web crawler and small helper tools: structured logging, buffer pools, scheduler arguments and status rules, primary-domain parsing, and Go package dependency inspection."
requires-python = ">=3.10"
dependencies = []
keywords = ["crawler", "buffer", "pool", "logging", "scheduler", "dependencies"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
showds = "crawltools.showds:main"
showpds = "crawltools.showpds:main"

[tool.hatch.build.targets.wheel]
packages = ["crawltools"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
