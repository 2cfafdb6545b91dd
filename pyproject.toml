[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gridsnake"
version = "1.0.0"
description = "A grid-based snake game with a testable game engine and a pygame front end"
requires-python = ">=3.10"
keywords = ["snake", "game", "arcade", "pygame", "grid"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
gridsnake = "gridsnake.app:main"

[tool.hatch.build.targets.wheel]
packages = ["gridsnake"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
