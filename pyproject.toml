[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chesslab"
version = "0.1.0"
description = "Losing-chess move generation, simple computer players and a small generic matrix type"
requires-python = ">=3.10"
dependencies = []
keywords = ["chess", "losing chess", "antichess", "board game", "ai", "matrix"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
chesslab-experiment = "chesslab.game:main"
chesslab-verify = "chesslab.verify:main"

[tool.hatch.build.targets.wheel]
packages = ["chesslab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
