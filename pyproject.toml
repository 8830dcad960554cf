[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fero"
version = "0.1.0"
description = "A tiny cooperative tasklet scheduler with bounded message queues"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "scheduler",
    "tasklet",
    "cooperative",
    "queue",
    "embedded",
]
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
    "Topic :: Software Development :: Embedded Systems",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fero-ping-pong = "fero.ping_pong:main"
fero-ticker = "fero.ticker:main"

[tool.hatch.build.targets.wheel]
packages = ["fero"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
