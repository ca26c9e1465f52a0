[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "turtlenet"
version = "0.1.0"
description = "A small Logo interpreter that turns turtle programs into line segments, with a TCP server, a client and a program checker."
requires-python = ">=3.10"
dependencies = []
keywords = ["logo", "turtle", "interpreter", "graphics", "tcp"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
turtlenet-server = "turtlenet.server:main"
turtlenet-client = "turtlenet.client:main"
turtlenet-suite = "turtlenet.suite:main"

[tool.hatch.build.targets.wheel]
packages = ["turtlenet"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
