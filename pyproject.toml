[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "statemachines"
version = "1.0.0"
description = "Small state machines built on the State pattern: a light switch, toggling contexts, a department store item and a job application workflow"
requires-python = ">=3.10"
dependencies = []
keywords = ["state pattern", "state machine", "fsm", "design patterns"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
statemachines = "statemachines.program:main"

[tool.hatch.build.targets.wheel]
packages = ["statemachines"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
