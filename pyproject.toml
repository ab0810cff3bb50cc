[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "meowcore"
version = "0.1.0"
description = "Core runtime pieces of a small game engine: entity registry, multi-buffering, reflection, cameras, meshes and frame timing."
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["game engine", "ecs", "reflection", "camera", "triple buffer", "frame rate"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["meowcore"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
