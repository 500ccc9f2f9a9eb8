[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sparmanager"
version = "0.1.0"
description = "Console manager for supermarket branches, suppliers and the products they carry"
requires-python = ">=3.10"
dependencies = []
keywords = ["supermarket", "inventory", "suppliers", "products", "console"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sparmanager = "sparmanager.app:main"

[tool.hatch.build.targets.wheel]
packages = ["sparmanager"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
