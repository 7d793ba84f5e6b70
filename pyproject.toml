[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "microsh"
version = "0.1.0"
description = "A minimal command runner with pipes and ';' sequencing, plus small character, string, byte-buffer and linked-list helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "pipeline", "command-runner", "strings", "utilities"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
microsh = "microsh.shell:main"

[tool.hatch.build.targets.wheel]
packages = ["microsh"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
