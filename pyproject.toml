[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lumari"
version = "0.1.0"
description = "Game logic and software renderer for Lumari, a virtual pet that lives on a wristwatch and grows with your steps"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "virtual-pet",
    "tamagotchi",
    "smartwatch",
    "pedometer",
    "rgb565",
    "framebuffer",
    "game",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["lumari"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
