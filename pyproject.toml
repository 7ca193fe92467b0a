[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pickmenu"
version = "5.4.0"
description = "Menu selection engine for picking lines from a list, with a file-filtering command"
requires-python = ">=3.10"
dependencies = []
keywords = ["menu", "launcher", "filter", "selection", "stest"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment :: Window Managers :: Applets",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
stest = "pickmenu.stest:main"

[tool.hatch.build.targets.wheel]
packages = ["pickmenu"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
