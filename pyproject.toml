[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "persistguard"
version = "0.1.0"
description = "Persistent file identifiers, hashed file backups, quarantine moves and sampled chunk reading"
requires-python = ">=3.10"
dependencies = []
keywords = ["security", "backup", "quarantine", "sha256", "file-id", "scanner"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security",
    "Topic :: System :: Archiving :: Backup",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
persistguard-ids = "persistguard.generator_cli:main"
persistguard-chunkscan = "persistguard.chunkscan:main"

[tool.hatch.build.targets.wheel]
packages = ["persistguard"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
