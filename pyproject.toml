[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "subleqvm"
version = "0.1.0"
description = "A SUBLEQ one-instruction computer: a two-pass assembler and an interpreter"
requires-python = ">=3.10"
dependencies = []
keywords = ["subleq", "oisc", "assembler", "interpreter", "virtual machine", "esoteric"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Emulators",
    "Topic :: Software Development :: Assemblers",
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
subleqvm = "subleqvm.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["subleqvm"]

[tool.pytest.ini_options]
addopts = "-ra"
