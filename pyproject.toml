[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ryukit"
version = "0.1.0"
description = "Byte buffers, worker threads, a task scheduler, JSON option readers, codecs, image resizing and audio conversion helpers for capture tools"
requires-python = ">=3.10"
dependencies = [
    "pillow",
    "numpy",
]
keywords = [
    "buffer",
    "scheduler",
    "thread",
    "audio",
    "resampling",
    "mixing",
    "jpeg",
    "lzma",
    "udp",
    "json",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Topic :: Multimedia :: Sound/Audio",
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["ryukit"]

[tool.hatch.build.targets.sdist]
include = [
    "ryukit",
    "tests",
    "README.md",
    "pyproject.toml",
]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
