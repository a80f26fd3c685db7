[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ltlr"
version = "0.1.0"
description = "Simulation core of a side-scrolling platformer: geometry, collision, easing, a fixed timestep and an entity-component world."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "platformer", "ecs", "collision", "easing", "fixed-timestep"]
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
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ltlr"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
