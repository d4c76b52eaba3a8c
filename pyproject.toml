[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "npcforge"
version = "0.1.0"
description = "Pathfinder 2e NPC generator with model-written descriptions and a small generation proxy"
requires-python = ">=3.10"
keywords = ["pathfinder", "pf2e", "npc", "rpg", "generator", "ollama"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Web Environment",
    "Framework :: Flask",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]
dependencies = [
    "flask",
    "requests",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[project.scripts]
npcforge = "npcforge.web:main"
npcforge-proxy = "npcforge.proxy:main"

[tool.hatch.build.targets.wheel]
packages = ["npcforge"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]
