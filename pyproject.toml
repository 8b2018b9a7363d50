[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "displaydev"
version = "0.1.0"
description = "Display device data model: resolutions, refresh rates, HDR states, topologies, EDID parsing, settings storage and logging."
requires-python = ">=3.10"
keywords = ["display", "monitor", "edid", "hdr", "topology", "resolution", "refresh-rate"]
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
    "Typing :: Typed",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["displaydev"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
