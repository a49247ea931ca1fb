[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "printfmt"
version = "0.1.0"
description = "A printf-style formatter with its own flag, width, precision and wide-character rules"
requires-python = ">=3.10"
dependencies = []
keywords = ["printf", "format", "string formatting", "utf-8"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
printfmt-demo = "printfmt.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["printfmt"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
