[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wrapkit"
version = "0.16.1"
description = "Word wrapping, filling, columns, indenting and dedenting of text with display-width awareness."
requires-python = ">=3.10"
dependencies = [
    "wcwidth",
]
keywords = ["text", "wrap", "fill", "indent", "dedent", "columns", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
wrapkit-demo = "wrapkit.demo:main"
wrapkit-sizes = "wrapkit.sizes:main"

[tool.hatch.build.targets.wheel]
packages = ["wrapkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
