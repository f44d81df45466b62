[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "groundcontrol"
version = "0.1.0"
description = "Ground station core for a radio-controlled aircraft: flight event types, telemetry packets, a batched SQLite flight log and control-mode handling."
requires-python = ">=3.10"
dependencies = []
keywords = ["aircraft", "ground-station", "telemetry", "flight-log", "sqlite", "rc-plane"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["groundcontrol"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
