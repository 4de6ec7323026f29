[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stealthai"
version = "0.1.0"
description = "A small decision-making AI framework with a finite-state guard simulation for a stealth game"
requires-python = ">=3.10"
dependencies = []
keywords = ["ai", "game-ai", "finite-state-machine", "blackboard", "stealth", "npc"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["stealthai"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
