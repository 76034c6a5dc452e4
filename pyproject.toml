[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kalishell"
version = "0.1.0"
description = "A small interactive shell with pipelines, redirection, aliases, history and a themed prompt"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "repl", "pipeline", "command-line", "aliases", "prompt"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: System Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
kalishell = "kalishell.shell:main"

[tool.hatch.build.targets.wheel]
packages = ["kalishell"]

[tool.pytest.ini_options]
addopts = "-ra"
