[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "yellowsnow"
version = "1.0.0"
description = "Don't Eat the Yellow Snow! A small arcade game: catch the white flakes, dodge the yellow ones."
requires-python = ">=3.10"
keywords = ["game", "arcade", "pygame", "snow"]
classifiers = [
    "Development Status :: 4 - Beta",
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
yellow-snow = "yellowsnow.game:main"

[tool.hatch.build.targets.wheel]
packages = ["yellowsnow"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
