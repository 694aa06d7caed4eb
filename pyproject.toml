[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "snub"
version = "1.1.0"
description = "Quick microphone mute toggle for macOS from the command line or a text tray menu"
requires-python = ">=3.10"
dependencies = []
keywords = ["microphone", "mute", "macos", "tray", "audio", "osascript"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Environment :: MacOS X",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: MacOS",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Mixers",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
snub = "snub.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["snub"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
