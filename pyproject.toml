[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tinyunix"
version = "0.1.0"
description = "Pieces of a small teaching Unix in pure Python: RISC-V paging helpers, ELF headers, a free-list allocator, a shell parser and classic user tools."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "operating-system",
    "teaching",
    "risc-v",
    "sv39",
    "elf",
    "malloc",
    "shell",
    "grep",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: System :: Operating System",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tinyunix-grep = "tinyunix.grep:main"
tinyunix-cat = "tinyunix.coreutils:cat_main"
tinyunix-echo = "tinyunix.coreutils:echo_main"
tinyunix-wc = "tinyunix.coreutils:wc_main"
tinyunix-ls = "tinyunix.coreutils:ls_main"

[tool.hatch.build.targets.wheel]
packages = ["tinyunix"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
