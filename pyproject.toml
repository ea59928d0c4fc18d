[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "adastra"
version = "1.0.0"
description = "Ad Astra: a retro pixel-art vertical space shooter"
requires-python = ">=3.10"
keywords = ["game", "arcade", "shooter", "retro", "pixel-art", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
adastra = "adastra.app:main"

[tool.hatch.build.targets.wheel]
packages = ["adastra"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
