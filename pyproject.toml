[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oslabs"
version = "0.1.0"
description = "Small, runnable demonstrations of POSIX process creation, waiting, process state, signals and stream I/O"
requires-python = ">=3.10"
dependencies = []
keywords = ["fork", "exec", "wait", "zombie", "signals", "procfs", "posix", "education"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: System :: Operating System",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
oslabs-cat = "oslabs.streams:main"
oslabs-signal-cat = "oslabs.signals:main"
oslabs-point = "oslabs.point:main"

[tool.hatch.build.targets.wheel]
packages = ["oslabs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
