[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "doublejumper"
version = "0.1.0"
description = "A vertical platform-jumping arcade game with themes, power-ups and a high-score table"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "arcade", "platformer", "jumping", "pygame"]
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
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
doublejumper = "doublejumper.app:main"

[tool.hatch.build.targets.wheel]
packages = ["doublejumper"]

[tool.pytest.ini_options]
addopts = "-ra"
