[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nvmefabrics"
version = "0.1.0"
description = "NVMe over Fabrics helpers: discovery field names, sysfs scanning, host identifiers and NVMe-MI formatting"
requires-python = ">=3.10"
keywords = ["nvme", "nvme-of", "fabrics", "discovery", "sysfs", "nvme-mi", "hostnqn"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Hardware",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["nvmefabrics"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
