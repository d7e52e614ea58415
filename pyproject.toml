[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sweptplay"
version = "0.1.0"
description = "A small side-scrolling platformer core with swept AABB collision, sprite animation and Mario-style game objects"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "platformer", "collision", "swept-aabb", "animation", "sprites"]
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
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sweptplay = "sweptplay.scene:main"

[tool.hatch.build.targets.wheel]
packages = ["sweptplay"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
