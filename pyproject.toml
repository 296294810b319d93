[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "smokefx"
version = "0.1.0"
description = "Interactive smoke particle simulator with toggleable visual effects"
requires-python = ">=3.10"
keywords = ["particles", "smoke", "simulation", "pygame", "effects"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Simulation",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
smokefx = "smokefx.main:main"
smokefx-classic = "smokefx.classic:main"

[tool.hatch.build.targets.wheel]
packages = ["smokefx"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
