[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "brainos"
version = "0.1.0"
description = "Layered configuration loading, logging setup and a JSON-schema tool registry for agents"
requires-python = ">=3.11"
dependencies = [
    "pyyaml",
]
keywords = ["configuration", "toml", "yaml", "json", "tools", "agents", "json-schema"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[tool.hatch.build.targets.wheel]
packages = ["brainos"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
