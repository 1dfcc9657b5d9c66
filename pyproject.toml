[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "skycast"
version = "0.1.0"
description = "Current, hourly and weekly weather forecasts for saved places, with place-name search"
requires-python = ">=3.10"
keywords = ["weather", "forecast", "geocoding", "open-meteo"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Atmospheric Science",
]
dependencies = [
    "requests",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[project.scripts]
skycast = "skycast.app:main"

[tool.hatch.build.targets.wheel]
packages = ["skycast"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
