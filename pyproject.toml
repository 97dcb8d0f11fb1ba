[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ecusim"
version = "0.1.0"
description = "Simulation of a layered automotive ECU software stack: headlight control and vehicle state sensing"
requires-python = ">=3.10"
dependencies = []
keywords = ["automotive", "ecu", "simulation", "can", "diagnostics", "headlight"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ecusim-headlight = "ecusim.headlight_ecu:main"
ecusim-vehicle-state = "ecusim.vehicle_ecu:main"

[tool.hatch.build.targets.wheel]
packages = ["ecusim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
