[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mcmodgetter"
version = "0.1.0"
description = "Download Minecraft mods from Modrinth for a given game version and mod loader"
requires-python = ">=3.10"
keywords = ["minecraft", "modrinth", "mods", "fabric", "forge", "neoforge", "downloader"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Framework :: AsyncIO",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Utilities",
]
dependencies = [
    "httpx",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
    "respx",
]

[project.scripts]
mcmodgetter = "mcmodgetter.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["mcmodgetter"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
